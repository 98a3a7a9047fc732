import unittest
import unittest.mock

from pcgrand.pipes import Sink, NullSink, ConsoleSink, ListSink

class NullSink_Tests(unittest.TestCase):
    def test_write(self):
        NullSink().write("abc")

class ConsoleSink_Tests(unittest.TestCase):
    def test_write(self):
        with unittest.mock.patch("builtins.print") as mock:
            ConsoleSink().write("abc")
            mock.assert_called_with("abc")

class ListSink_Tests(unittest.TestCase):
    def test_write(self):
        sink = ListSink()
        sink.write("a")
        sink.write("b")
        self.assertEqual(["a","b"], sink.items)

    def test_given_list(self):
        items = ["z"]
        ListSink(items).write("a")
        self.assertEqual(["z","a"], items)

    def test_instances_do_not_share_items(self):
        ListSink().write("a")
        self.assertEqual([], ListSink().items)

class Sink_Tests(unittest.TestCase):
    def test_abstract(self):
        with self.assertRaises(TypeError):
            Sink()

if __name__ == '__main__':
    unittest.main()
