""" ORF records, their ordering and numbering, and the FASTA writer """
from __future__ import annotations
from typing import TYPE_CHECKING, IO
import dataclasses
from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord
from orfScan import get_logger


if TYPE_CHECKING:
    from typing import List, Optional, Tuple


@dataclasses.dataclass(frozen=True)
class ORFRecord:
    """ A translated ORF.

    ## Attributes:
        - number (int): Sequential number, assigned when emitted.
        - source_name (str): Name of the nucleotide sequence.
        - start (int): 1-based top strand coordinate of the first nucleotide
            of the first codon.
        - end (int): 1-based top strand coordinate of the last nucleotide of
            the last codon. The stop codon is not included. start > end for
            bottom strand ORFs.
        - frame (int): Reading frame, 1-3 top strand, 4-6 bottom strand.
        - seq (str): Amino acid sequence.
        - description (str): Description of the source sequence.
    """
    source_name: str
    start: int
    end: int
    frame: int
    seq: str
    description: str = ''
    number: Optional[int] = None

    @property
    def length(self) -> int:
        """ Number of amino acids """
        return len(self.seq)

    @property
    def is_forward(self) -> bool:
        """ Whether the ORF is on the top strand """
        return self.frame <= 3

    def sort_key(self) -> Tuple[int, int, int]:
        """ Lowest top strand coordinate, then top strand first, then frame. """
        return (min(self.start, self.end), 0 if self.is_forward else 1, self.frame)

    @property
    def id(self) -> str:
        """ FASTA identifier """
        return f"orf{self.number}"

    def get_header_description(self) -> str:
        """ Header fields that follow the identifier """
        desc = f"source={self.source_name} coords={self.start}..{self.end} " +\
            f"length={self.length} frame={self.frame}"
        if self.description:
            desc += f" {self.description}"
        return desc

    def to_seq_record(self) -> SeqRecord:
        """ Convert to a Biopython SeqRecord """
        return SeqRecord(
            Seq(self.seq), id=self.id, name=self.id,
            description=self.get_header_description()
        )


class FastaORFWriter():
    """ Writes ORF records as FASTA with 60 residues per line. """
    def __init__(self, handle:IO):
        """ Constructor """
        self.handle = handle
        self.count = 0

    def write(self, record:ORFRecord):
        """ Write one ORF record """
        SeqIO.write(record.to_seq_record(), self.handle, 'fasta')
        self.count += 1


class ORFEmitter():
    """ Collects the ORFs of one sequence and hands them to the writer in
    order.

    Frames close ORFs in scan order, which is not the output order, so all
    records of a sequence are held until `flush` sorts and numbers them.
    Numbers continue from one sequence to the next.
    """
    def __init__(self, writer:FastaORFWriter=None, first_number:int=1):
        """ Constructor """
        self.writer = writer
        self.next_number = first_number
        self.buffer:List[ORFRecord] = []

    def __len__(self) -> int:
        """ Number of records waiting to be flushed """
        return len(self.buffer)

    def add(self, record:ORFRecord):
        """ Add a record of the current sequence """
        self.buffer.append(record)

    def flush(self) -> List[ORFRecord]:
        """ Sort, number and write the buffered records. Returns the numbered
        records. """
        records = []
        for record in sorted(self.buffer, key=lambda x: x.sort_key()):
            record = dataclasses.replace(record, number=self.next_number)
            self.next_number += 1
            if self.writer is not None:
                self.writer.write(record)
            records.append(record)
        self.buffer = []
        return records

    def discard(self) -> int:
        """ Drop the buffered records of a sequence that failed. Returns the
        number of records dropped. """
        n = len(self.buffer)
        if n:
            get_logger().debug('Discarding %i unwritten ORFs.', n)
        self.buffer = []
        return n
