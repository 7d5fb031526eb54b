"""
LR35902 (Game Boy) Architecture Package
"""
from .registers import Flag, Reg, RegPair
from .snapshot import RegisterSnapshot
from .state import RegisterFile
