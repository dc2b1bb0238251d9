from .listing import InstructionRecord, ListingRow, format_listing, hex_bytes
