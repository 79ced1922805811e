import os
import tempfile
import unittest

from fstree.codec import decode_text, encode_text, load_tree, new_root, save_tree
from fstree.errors import StorageError
from fstree.models import Node, NodeKind


class TestRepository(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.dir = self._tmp.name

    def test_load_reads_utf8(self) -> None:
        path = os.path.join(self.dir, "structure.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("C:\n   fotografii\n      vacanță.jpg//2048\n")

        root = load_tree(path)
        photo = root.children[0].children[0].children[0]
        self.assertEqual(photo.name, "vacanță.jpg")
        self.assertIs(photo.kind, NodeKind.FILE)
        self.assertEqual(photo.size_bytes, 2048)

    def test_load_crlf_file(self) -> None:
        path = os.path.join(self.dir, "crlf.txt")
        with open(path, "wb") as f:
            f.write(b"C:\r\n   a.txt//3\r\n")
        root = load_tree(path)
        self.assertEqual(root.children[0].children[0].size_bytes, 3)

    def test_save_then_load(self) -> None:
        root = decode_text("C:\n   docs\n      notes.txt//120\nD:\n")
        path = os.path.join(self.dir, "nested", "out.txt")

        written = save_tree(root, path)
        self.assertEqual(written, 4)

        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "C:\n   docs\n      notes.txt//120\nD:\n")

        again = load_tree(path)
        self.assertEqual(
            [n.name for n, _ in again.walk()],
            ["(root)", "C:", "docs", "notes.txt", "D:"],
        )

    def test_save_matches_encode_text(self) -> None:
        root = decode_text("C:\n   a.txt//3\n")
        root.children[0].add_child(Node.placeholder())
        path = os.path.join(self.dir, "out.txt")
        self.assertEqual(save_tree(root, path), 2)
        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), encode_text(root))

        empty = os.path.join(self.dir, "empty.txt")
        self.assertEqual(save_tree(new_root(), empty), 0)
        with open(empty, encoding="utf-8") as f:
            self.assertEqual(f.read(), "")

    def test_missing_file_raises_storage_error(self) -> None:
        path = os.path.join(self.dir, "nope.txt")
        with self.assertRaises(StorageError) as ctx:
            load_tree(path)
        self.assertIsInstance(ctx.exception.cause, FileNotFoundError)
        self.assertEqual(ctx.exception.details["file"], path)

    def test_bad_encoding_raises_storage_error(self) -> None:
        path = os.path.join(self.dir, "latin.txt")
        with open(path, "wb") as f:
            f.write("C:\n   caf\xe9.txt//1\n".encode("latin-1"))
        with self.assertRaises(StorageError):
            load_tree(path, encoding="utf-8")

    def test_save_into_directory_path_fails(self) -> None:
        root = decode_text("C:\n")
        with self.assertRaises(StorageError):
            save_tree(root, self.dir)


if __name__ == "__main__":
    unittest.main()
