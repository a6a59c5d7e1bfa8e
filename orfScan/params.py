""" This module defines the parameter object that groups the scan settings
together. """
from __future__ import annotations
from typing import TYPE_CHECKING
from orfScan import constant, err, get_logger


if TYPE_CHECKING:
    from typing import Dict, Union

START_POLICY_ALIASES = {
    'none': constant.StartPolicy.NONE,
    'aug': constant.StartPolicy.REQUIRE_AUG,
    'require_aug': constant.StartPolicy.REQUIRE_AUG,
    'any': constant.StartPolicy.REQUIRE_ANY_INITIATOR,
    'require_any_initiator': constant.StartPolicy.REQUIRE_ANY_INITIATOR
}

class TranslationParams():
    """ Six-frame translation parameters.

    ## Attributes:
        - code_id (int): NCBI genetic code table id.
        - min_length (int): The minimal length of ORFs in amino acids,
            inclusive. Shorter ORFs are discarded.
        - start_policy (StartPolicy): Whether an ORF may open at any codon or
            only at an ATG or any initiator of the genetic code.
        - strand (StrandSelection): Which strands are scanned.
        - window_size (int): Number of nucleotides held in the window buffer.
        - window_redundancy (int): Number of codons shared by two consecutive
            windows. The window overlap is 3 times this value.
    """
    def __init__(self, code_id:int=None, min_length:int=None,
            start_policy:Union[str, constant.StartPolicy]=None,
            strand:Union[str, constant.StrandSelection]=None,
            window_size:int=None, window_redundancy:int=None):
        """ constructor """
        logger = get_logger()

        if code_id is None:
            logger.info(
                "Using default genetic code table %i.", constant.DEFAULT_CODE_ID
            )
            code_id = constant.DEFAULT_CODE_ID
        self.code_id = int(code_id)
        if self.code_id not in constant.SUPPORTED_CODE_IDS:
            raise err.InvalidCodeId(code_id, constant.SUPPORTED_CODE_IDS)

        if min_length is None:
            logger.info(
                "Using default min_length = %i.", constant.DEFAULT_MIN_LENGTH
            )
            min_length = constant.DEFAULT_MIN_LENGTH
        self.min_length = int(min_length)
        if self.min_length < 1:
            raise ValueError(
                f"min_length must be a positive integer, got {min_length}."
            )

        self.start_policy = self.parse_start_policy(start_policy)
        self.strand = self.parse_strand(strand)

        if window_size is None:
            window_size = constant.DEFAULT_WINDOW_SIZE
        if window_redundancy is None:
            window_redundancy = constant.DEFAULT_WINDOW_REDUNDANCY
        self.window_size = int(window_size)
        self.window_redundancy = int(window_redundancy)
        if self.window_redundancy < 1:
            raise ValueError(
                f"window_redundancy must be at least 1, got {window_redundancy}."
            )
        if self.window_size <= self.overlap:
            logger.warning(
                "Window size %i is not larger than the window overlap %i. "
                "Setting window size to %i.",
                self.window_size, self.overlap, self.overlap * 2
            )
            self.window_size = self.overlap * 2

    @property
    def overlap(self) -> int:
        """ Number of nucleotides shared by two consecutive windows. """
        return constant.CODON_SIZE * self.window_redundancy

    @property
    def requires_initiator(self) -> bool:
        """ Whether ORFs may only open at an initiator codon. """
        return self.start_policy is not constant.StartPolicy.NONE

    @staticmethod
    def parse_start_policy(start_policy) -> constant.StartPolicy:
        """ Get the start policy from its name. """
        if start_policy is None:
            return constant.StartPolicy.NONE
        if isinstance(start_policy, constant.StartPolicy):
            return start_policy
        key = str(start_policy).lower().replace('-', '_')
        if key not in START_POLICY_ALIASES:
            raise ValueError(f"Unknown start policy: {start_policy}")
        return START_POLICY_ALIASES[key]

    @staticmethod
    def parse_strand(strand) -> constant.StrandSelection:
        """ Get the strand selection from its name. """
        if strand is None:
            return constant.StrandSelection.BOTH
        if isinstance(strand, constant.StrandSelection):
            return strand
        try:
            return constant.StrandSelection(str(strand).lower())
        except ValueError as e:
            raise ValueError(f"Unknown strand selection: {strand}") from e

    def jsonfy(self) -> Dict:
        """ jsonfy """
        return {
            'code_id': self.code_id,
            'min_length': self.min_length,
            'start_policy': self.start_policy.value,
            'strand': self.strand.value,
            'window_size': self.window_size,
            'window_redundancy': self.window_redundancy
        }
