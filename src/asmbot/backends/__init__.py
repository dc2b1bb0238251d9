from .keystone_driver import KeystoneAssembler
from .capstone_driver import CapstoneDisassembler
