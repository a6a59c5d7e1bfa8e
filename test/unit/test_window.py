""" Test module for the window buffer """
import unittest
from orfScan import err
from orfScan.seqio import SeqRecordSource, StreamSource
from orfScan.window import WindowBuffer, normalize, reverse_complement


SEQ = 'ACGTACGTAC'

class TestWindowBuffer(unittest.TestCase):
    """ Test cases for WindowBuffer """
    def test_load(self):
        """ Load the first window """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=4, overlap=3)
        window.load(0)
        self.assertEqual(window.seq, 'ACGT')
        self.assertEqual(window.start, 0)
        self.assertEqual(window.end, 4)

    def test_load_cut_at_sequence_end(self):
        """ A window near the end is shorter """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=4, overlap=3)
        window.load(8)
        self.assertEqual(window.seq, 'AC')
        self.assertEqual(window.end, 10)

    def test_load_out_of_range(self):
        """ Windows must start inside the sequence """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=4, overlap=3)
        with self.assertRaises(err.WindowOutOfRange):
            window.load(10)
        with self.assertRaises(err.WindowOutOfRange):
            window.load(-1)

    def test_advance(self):
        """ The next window starts overlap nucleotides before the end """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=6, overlap=3)
        window.load(0)
        self.assertTrue(window.advance())
        self.assertEqual((window.start, window.end), (3, 9))
        self.assertEqual(window.seq, SEQ[3:9])
        self.assertTrue(window.advance())
        self.assertEqual((window.start, window.end), (6, 10))
        self.assertEqual(window.seq, SEQ[6:10])
        self.assertFalse(window.advance())

    def test_advance_stream(self):
        """ Advancing only reads forward, so streams can be used """
        source = StreamSource('seq1', '', len(SEQ), iter(['ACG', 'TAC', 'GTAC']))
        window = WindowBuffer(source, size=4, overlap=3)
        window.load(0)
        seen = [window.seq]
        while window.advance():
            seen.append(window.seq)
        self.assertEqual(seen, [SEQ[i:i+4] for i in range(7)])

    def test_retreat(self):
        """ The previous window ends overlap nucleotides after the start """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=4, overlap=3)
        window.load(6)
        self.assertEqual(window.seq, 'GTAC')
        self.assertTrue(window.retreat())
        self.assertEqual((window.start, window.end), (5, 9))
        self.assertEqual(window.seq, 'CGTA')

    def test_retreat_to_beginning(self):
        """ Retreat stops at the first nucleotide """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=7, overlap=3)
        window.load(3)
        self.assertTrue(window.retreat())
        self.assertEqual((window.start, window.end), (0, 6))
        self.assertEqual(window.seq, SEQ[0:6])
        self.assertFalse(window.retreat())

    def test_retreat_non_rewindable(self):
        """ Streams can not be read backwards """
        source = StreamSource('seq1', '', len(SEQ), iter([SEQ]))
        window = WindowBuffer(source, size=4, overlap=3)
        window.load(6)
        with self.assertRaises(err.NonRewindableSource):
            window.retreat()

    def test_symbol_and_complement(self):
        """ Complement is computed on read """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=4, overlap=3)
        window.load(0)
        self.assertEqual(window.symbol_at(0), 'A')
        self.assertEqual(window.complement_at(0), 'T')
        self.assertEqual(window.complement_at(2), 'C')
        self.assertEqual(window.seq, 'ACGT')
        with self.assertRaises(err.WindowOutOfRange):
            window.symbol_at(4)

    def test_codons(self):
        """ Forward and reverse complement codons """
        window = WindowBuffer(SeqRecordSource(SEQ, 'seq1'), size=5, overlap=3)
        window.load(0)
        self.assertEqual(window.codon_at(1), 'CGT')
        self.assertEqual(window.reverse_codon_at(2), 'CGT')
        self.assertEqual(window.reverse_codon_at(4), 'TAC')
        with self.assertRaises(err.WindowOutOfRange):
            window.codon_at(3)
        with self.assertRaises(err.WindowOutOfRange):
            window.reverse_codon_at(1)

    def test_normalize(self):
        """ RNA, lower case and unknown symbols """
        self.assertEqual(normalize('acgu'), 'ACGT')
        self.assertEqual(normalize('AC-G*'), 'ACNGN')
        self.assertEqual(normalize('ryn'), 'RYN')
        self.assertEqual(normalize('AÅC'), 'ANC')
        self.assertEqual(reverse_complement('ATGR'), 'YCAT')

    def test_load_normalizes(self):
        """ The buffer holds normalized nucleotides """
        window = WindowBuffer(SeqRecordSource('augc', 'rna'), size=4, overlap=3)
        window.load(0)
        self.assertEqual(window.seq, 'ATGC')

    def test_invalid_sizes(self):
        """ Overlap must hold a codon and be smaller than the window """
        source = SeqRecordSource(SEQ, 'seq1')
        with self.assertRaises(ValueError):
            WindowBuffer(source, size=10, overlap=2)
        with self.assertRaises(ValueError):
            WindowBuffer(source, size=3, overlap=3)

    def test_read_failure(self):
        """ Source errors are reported as SequenceIOError """
        class _BrokenSource(SeqRecordSource):
            def fetch(self, start, end):
                raise OSError('disk error')
        window = WindowBuffer(_BrokenSource(SEQ, 'seq1'), size=4, overlap=3)
        with self.assertRaises(err.SequenceIOError):
            window.load(0)
