import os
import tempfile
import unittest

from kgencode.exceptions import SinkWriteError, SourceReadError
from kgencode.exporter import export, main
from kgencode.pipeline import EncodingSummary
from kgencode.utils import load_encoded_kg

RDF_XML = """<?xml version="1.0"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:ex="http://example.org/">
  <rdf:Description rdf:about="http://example.org/A">
    <ex:p rdf:resource="http://example.org/B"/>
    <ex:q rdf:resource="http://example.org/A"/>
  </rdf:Description>
  <rdf:Description rdf:about="http://example.org/B">
    <ex:p rdf:resource="http://example.org/A"/>
  </rdf:Description>
</rdf:RDF>
"""


class TestExporter(unittest.TestCase):
    """Tests for `kgencode.exporter`."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.tsv = self.path('graph.tsv')
        with open(self.tsv, 'w') as f:
            f.write('A\tp\tB\nB\tp\tA\nA\tq\tA\n')
        self.rdf = self.path('graph.rdf')
        with open(self.rdf, 'w') as f:
            f.write(RDF_XML)
        self.outputs = [self.path('entities.txt'), self.path('relations.txt'),
                        self.path('triples.txt')]

    def tearDown(self):
        self.tmp.cleanup()

    def path(self, name):
        return os.path.join(self.tmp.name, name)

    @staticmethod
    def read(path):
        with open(path) as f:
            return f.read()

    def test_export_tsv(self):
        summary = export(self.tsv, *self.outputs, rdf_format='tsv')
        assert summary == EncodingSummary(2, 2, 3)
        assert self.read(self.outputs[0]) == 'A\t0\nB\t1\n'
        assert self.read(self.outputs[1]) == 'p\t0\nq\t1\n'
        assert self.read(self.outputs[2]) == '0\t0\t1\n1\t0\t0\n0\t1\t0\n'

    def test_export_rdf(self):
        summary = export(self.rdf, *self.outputs)
        assert summary == EncodingSummary(2, 2, 3)

        kg = load_encoded_kg(*self.outputs)
        assert set(kg.ent2ix) == {'http://example.org/A', 'http://example.org/B'}
        assert set(kg.rel2ix) == {'http://example.org/p', 'http://example.org/q'}
        facts = set()
        for h, t, r in kg:
            facts.add((kg.ix2ent[h], kg.ix2rel[r], kg.ix2ent[t]))
        assert facts == {
            ('http://example.org/A', 'http://example.org/p', 'http://example.org/B'),
            ('http://example.org/A', 'http://example.org/q', 'http://example.org/A'),
            ('http://example.org/B', 'http://example.org/p', 'http://example.org/A'),
        }

    def test_export_empty(self):
        with open(self.tsv, 'w'):
            pass
        assert export(self.tsv, *self.outputs, rdf_format='tsv') == EncodingSummary(0, 0, 0)
        for p in self.outputs:
            assert self.read(p) == ''

    def test_source_failure(self):
        with self.assertRaises(SourceReadError):
            export(self.path('missing.rdf'), *self.outputs)

    def test_sink_failure(self):
        outputs = [self.outputs[0], self.path('missing/relations.txt'), self.outputs[2]]
        with self.assertRaises(SinkWriteError) as ctx:
            export(self.tsv, *outputs, rdf_format='tsv')
        assert ctx.exception.path == outputs[1]
        # files opened before the failure are released and kept
        assert os.path.exists(self.outputs[0])

    def test_main(self):
        assert main(['--input.format=tsv', self.tsv] + self.outputs) == 0
        assert self.read(self.outputs[2]) == '0\t0\t1\n1\t0\t0\n0\t1\t0\n'

    def test_main_delimiter(self):
        assert main(['--input.format=tsv', '--output.delimiter=,', self.tsv] + self.outputs) == 0
        assert self.read(self.outputs[0]) == 'A,0\nB,1\n'

    def test_main_usage(self):
        assert main([self.tsv]) == 2
        assert main([self.tsv] + self.outputs + ['extra']) == 2
        assert main(['--progress', self.tsv] + self.outputs) == 2
        assert main(['--foo.bar=1', self.tsv] + self.outputs) == 2
        assert main(['--progress.x=1', self.tsv] + self.outputs) == 2
        assert not os.path.exists(self.outputs[0])

    def test_main_failures(self):
        assert main([self.path('missing.rdf')] + self.outputs) == 1
        assert main(['--input.format=tsv', self.tsv, self.path('missing/e.txt'),
                     self.outputs[1], self.outputs[2]]) == 1

    def test_main_config_failures(self):
        assert main(['--config=' + self.path('missing.yaml'), self.tsv] + self.outputs) == 1
        bad = self.path('bad.yaml')
        with open(bad, 'w') as f:
            f.write('input: [unclosed\n')
        assert main(['--config=' + bad, self.tsv] + self.outputs) == 1
        assert not os.path.exists(self.outputs[0])

    @unittest.skipUnless(os.path.exists('/dev/full'), 'requires /dev/full')
    def test_close_failure(self):
        with self.assertRaises(SinkWriteError) as ctx:
            export(self.tsv, self.outputs[0], self.outputs[1], '/dev/full', rdf_format='tsv')
        assert ctx.exception.operation == 'close'
        assert ctx.exception.path == '/dev/full'
        # the other outputs are complete and kept
        assert self.read(self.outputs[0]) == 'A\t0\nB\t1\n'
        assert main(['--input.format=tsv', self.tsv, self.outputs[0], self.outputs[1],
                     '/dev/full']) == 1
