"""
Built-in Levels - A small starter levelset played when no file is given.
"""

from ..session.levelset import Levelset

BUILTIN_LEVELS = """\
; Starter Set

#####
#@$.#
#####
; First Push

######
#    #
# $$ #
# .. #
#  @ #
######
; Side by Side

#######
#.  @ #
#  $  #
# *   #
#######
; Around the Corner

 #####
##   #
#+$  #
## * #
 #####
; Step Back
"""


def builtin_levelset() -> Levelset:
    """Load a fresh copy of the built-in levels."""
    return Levelset.load(BUILTIN_LEVELS)
