""" Per reading frame ORF state machine """
from __future__ import annotations
from typing import TYPE_CHECKING
import dataclasses
from orfScan import constant


if TYPE_CHECKING:
    from typing import List, Optional
    from orfScan.codon_table import GeneticCode


@dataclasses.dataclass
class ClosedORF:
    """ An ORF closed by a stop codon, in strand-local coordinates.

    `start` is the position of the first codon and `end` the position of the
    stop codon, so the ORF covers [start, end) of its strand. """
    start: int
    end: int
    seq: str

@dataclasses.dataclass
class FrameState:
    """ State of one of the six reading frames.

    Positions are 0-based and strand-local: offsets from the start of the top
    strand for Watson frames, and from the start of the reverse complement for
    Crick frames. `next_pos` is the position of the next codon this frame will
    consume; it persists across window moves together with any ORF still open.
    """
    frame_index: int
    strand: constant.Strand
    phase: int
    next_pos: int = None
    open_start: Optional[int] = None
    accumulated: List[str] = dataclasses.field(default_factory=list)

    def __post_init__(self):
        """ post init """
        if self.next_pos is None:
            self.next_pos = self.phase

    @classmethod
    def create_all(cls) -> List[FrameState]:
        """ Create the six frames: 1-3 on the top strand at offsets 0, 1, 2,
        and 4-6 on the bottom strand, frame 4 anchored at the last
        nucleotide. """
        frames = []
        for i, strand in enumerate([constant.Strand.WATSON, constant.Strand.CRICK]):
            for phase in range(3):
                frames.append(cls(frame_index=i * 3 + phase + 1, strand=strand,
                    phase=phase))
        return frames

    @property
    def active(self) -> bool:
        """ Whether an ORF is open """
        return self.open_start is not None

    @property
    def is_forward(self) -> bool:
        """ Whether the frame is on the top strand """
        return self.strand is constant.Strand.WATSON

    def consume(self, codon:str, pos:int, code:GeneticCode,
            start_policy:constant.StartPolicy, min_length:int
            ) -> Optional[ClosedORF]:
        """ Consume the codon at `pos`. Returns the ORF closed by this codon
        if it is long enough. """
        residue = code.translate(codon)
        self.next_pos = pos + constant.CODON_SIZE

        if self.open_start is None:
            if residue == constant.STOP_SYMBOL:
                return None
            if start_policy is constant.StartPolicy.NONE:
                self.accumulated.append(residue)
            else:
                if start_policy is constant.StartPolicy.REQUIRE_AUG:
                    is_start = code.is_aug(codon)
                else:
                    is_start = code.is_initiator(codon)
                if not is_start:
                    return None
                self.accumulated.append(constant.INITIATOR_RESIDUE)
            self.open_start = pos
            return None

        if residue != constant.STOP_SYMBOL:
            self.accumulated.append(residue)
            return None

        closed = None
        if len(self.accumulated) >= min_length:
            closed = ClosedORF(
                start=self.open_start, end=pos, seq=''.join(self.accumulated)
            )
        self.open_start = None
        self.accumulated = []
        return closed

    def finish(self):
        """ End of sequence. An ORF still open has no stop codon and is
        dropped. """
        self.open_start = None
        self.accumulated = []

    def to_top_strand(self, orf:ClosedORF, seq_len:int):
        """ 1-based top strand coordinates of the first and last nucleotide of
        a closed ORF, stop codon excluded. Crick ORFs have start > end. """
        if self.is_forward:
            return orf.start + 1, orf.end
        return seq_len - orf.start, seq_len - orf.end + 1
