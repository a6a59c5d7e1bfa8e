""" Constants and enums shared across orfScan """
from enum import Enum


class StartPolicy(Enum):
    """ Where a reading frame is allowed to open an ORF. """
    NONE = 'none'
    REQUIRE_AUG = 'aug'
    REQUIRE_ANY_INITIATOR = 'any'

class Strand(Enum):
    """ Orientation of a reading frame. """
    WATSON = 'watson'
    CRICK = 'crick'

class StrandSelection(Enum):
    """ Which strands are scanned. """
    BOTH = 'both'
    WATSON = 'watson'
    CRICK = 'crick'

    def strands(self):
        """ Strands to scan, top strand first """
        if self is StrandSelection.WATSON:
            return (Strand.WATSON,)
        if self is StrandSelection.CRICK:
            return (Strand.CRICK,)
        return (Strand.WATSON, Strand.CRICK)

# NCBI transl_table ids that can be selected with -c
SUPPORTED_CODE_IDS = (1, 2, 3, 4, 5, 6, 9, 10, 11, 12, 13, 14, 16, 21, 22, 23, 24, 25)

STOP_SYMBOL = '*'
UNKNOWN_RESIDUE = 'X'
INITIATOR_RESIDUE = 'M'
UNKNOWN_NUCLEOTIDE = 'N'

CODON_SIZE = 3

DEFAULT_CODE_ID = 1
DEFAULT_MIN_LENGTH = 20
DEFAULT_WINDOW_SIZE = 1_000_000
DEFAULT_WINDOW_REDUNDANCY = 1

