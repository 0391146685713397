import io
import unittest
from unittest import mock

from querent import diagnostics, from_sequence, from_mapping, configure
from querent.diagnostics import Report, MalformedArgument, expect, expect_callable

class ReportTests(unittest.TestCase):
	
	def tearDown(self) -> None:
		configure(verbose=0)
	
	def test_quiet_by_default(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			Report().info("nobody hears this")
			from_sequence([1, 2]).to_sequence()
		self.assertEqual("", err.getvalue())
	
	def test_verbose_report(self):
		stream = io.StringIO()
		Report(verbose=1, stream=stream).info("one", "two")
		Report(verbose=1, stream=stream).info("three", level=2)
		Report(verbose=None, stream=stream).info("four")
		self.assertEqual("one two\n", stream.getvalue())
	
	def test_configure_replaces_the_current_report(self):
		report = configure(verbose=2)
		self.assertIs(report, diagnostics.current())
		self.assertEqual(2, diagnostics.current().verbose)
	
	def test_terminals_report_counts(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			configure(verbose=1)
			from_sequence([1, 2, 3]).to_sequence()
			from_sequence([{"key": "a", "value": 1}, 5]).to_mapping()
		self.assertEqual("to_sequence: 3 items\nto_mapping: 1 keys, 1 items skipped\n", err.getvalue())
	
	def test_pipelines_described_at_level_two(self):
		stream = io.StringIO()
		configure(verbose=2, stream=stream)
		from_mapping({"a": 1}).where(bool).first()
		self.assertEqual("first over mapping[1] | where(bool) (1 operators)\n", stream.getvalue())

class ExpectationTests(unittest.TestCase):
	
	def test_expect(self):
		expect(True, "anything")
		with self.assertRaises(MalformedArgument) as cm:
			expect(False, "sequence")
		self.assertEqual("expected sequence", str(cm.exception))
		self.assertIsInstance(cm.exception, TypeError)
	
	def test_expect_callable(self):
		self.assertIs(len, expect_callable(len, "selector"))
		with self.assertRaisesRegex(MalformedArgument, "^expected selector function$"):
			expect_callable("len", "selector")


if __name__ == '__main__':
	unittest.main()
