""" Six-frame ORF scan driver.

The driver walks a window over the sequence once per requested strand. The top
strand is read left to right. The bottom strand is read right to left through
the reverse complement view of the same window, which needs a rewindable
source. Each frame remembers the next codon it needs, so a codon that spans two
windows is read from the second one. ORFs still open when the window moves are
carried in their frame state. The window size therefore never limits the ORF
length.
"""
from __future__ import annotations
from typing import TYPE_CHECKING
from orfScan import constant, err, get_logger
from orfScan.codon_table import get_genetic_code
from orfScan.emitter import ORFEmitter, ORFRecord
from orfScan.frame import FrameState
from orfScan.window import WindowBuffer


if TYPE_CHECKING:
    from typing import Iterable, Iterator, List, Tuple
    from orfScan.codon_table import GeneticCode
    from orfScan.params import TranslationParams
    from orfScan.seqio import SequenceSource


class ORFScanner():
    """ Six-frame ORF scanner.

    ## Attributes:
        - params (TranslationParams): Scan parameters.
        - code (GeneticCode): The genetic code shared by all frames.
    """
    def __init__(self, params:TranslationParams, code:GeneticCode=None):
        """ Constructor """
        self.params = params
        self.code = code or get_genetic_code(params.code_id)

    @property
    def strands(self) -> Tuple[constant.Strand, ...]:
        """ Strands to scan """
        return self.params.strand.strands()

    def check_source(self, source:SequenceSource):
        """ Checks that the source can be read in the directions needed. """
        if constant.Strand.CRICK in self.strands and not source.rewindable:
            raise err.NonRewindableSource(source.name)

    def create_window(self, source:SequenceSource) -> WindowBuffer:
        """ Create a window buffer over a source. """
        return WindowBuffer(
            source=source, size=self.params.window_size,
            overlap=self.params.overlap
        )

    def iter_codons(self, source:SequenceSource, strand:constant.Strand
            ) -> Iterator[Tuple[int, int, str]]:
        """ Iterate over the codons of the three frames of a strand, as
        (phase, pos, codon). Positions are strand-local. Within a window the
        three phases are visited in turn, so positions of one phase are
        ascending but phases are interleaved window by window. """
        seq_len = source.length
        if seq_len < constant.CODON_SIZE:
            return
        window = self.create_window(source)
        next_pos = [0, 1, 2]

        if strand is constant.Strand.WATSON:
            window.load(0)
            while True:
                for phase in range(3):
                    pos = next_pos[phase]
                    while pos + 3 <= window.end:
                        yield phase, pos, window.codon_at(pos)
                        pos += 3
                    next_pos[phase] = pos
                if not window.advance():
                    break
            return

        window.load(max(0, seq_len - window.size))
        while True:
            for phase in range(3):
                pos = next_pos[phase]
                # top strand offset of the codon's first nucleotide
                top = seq_len - 1 - pos
                while top - 2 >= window.start:
                    yield phase, pos, window.reverse_codon_at(top)
                    pos += 3
                    top -= 3
                next_pos[phase] = pos
            if not window.retreat():
                break

    def scan_strand(self, source:SequenceSource, strand:constant.Strand
            ) -> Iterator[ORFRecord]:
        """ Scan the three frames of a strand, and yield ORFs as they close. """
        frames = [x for x in FrameState.create_all() if x.strand is strand]
        code = self.code
        start_policy = self.params.start_policy
        min_length = self.params.min_length
        seq_len = source.length
        for phase, pos, codon in self.iter_codons(source, strand):
            frame = frames[phase]
            orf = frame.consume(codon, pos, code, start_policy, min_length)
            if orf is None:
                continue
            start, end = frame.to_top_strand(orf, seq_len)
            yield ORFRecord(
                source_name=source.name, start=start, end=end,
                frame=frame.frame_index, seq=orf.seq,
                description=source.description
            )
        for frame in frames:
            frame.finish()

    def scan(self, source:SequenceSource) -> Iterator[ORFRecord]:
        """ Scan all requested strands of a sequence. ORFs are yielded in the
        order they close, unnumbered. """
        self.check_source(source)
        if source.length < constant.CODON_SIZE:
            get_logger().warning(
                'Sequence %s is shorter than a codon (%i nt).',
                source.name, source.length
            )
            return
        for strand in self.strands:
            yield from self.scan_strand(source, strand)

    def translate_sources(self, sources:Iterable[SequenceSource],
            emitter:ORFEmitter) -> List[str]:
        """ Scan every source and emit its ORFs. A sequence that can not be
        read is skipped and its ORFs are dropped. Returns the names of the
        sequences that failed.

        Sources are checked one at a time as they are reached, so when the
        bottom strand is requested and a non-rewindable source follows
        rewindable ones, the ORFs of the earlier sources are already written
        when NonRewindableSource is raised. Callers mixing source kinds must
        check them all first. """
        logger = get_logger()
        failed = []
        for source in sources:
            self.check_source(source)
            try:
                for record in self.scan(source):
                    emitter.add(record)
            except err.SequenceIOError as e:
                emitter.discard()
                logger.error('Failed to scan %s: %s', source.name, e)
                failed.append(source.name)
                continue
            records = emitter.flush()
            logger.info(
                '%s: %i nt scanned, %i ORFs written.',
                source.name, source.length, len(records)
            )
        return failed
