import unittest

from fstree.errors import DuplicateNameError, InvalidArgumentError, InvalidStateError
from fstree.models import Node, NodeKind
from fstree.service.validators import (
    validate_can_have_children,
    validate_move_no_cycle,
    validate_not_root,
    validate_unique_name,
)


class TestValidators(unittest.TestCase):
    def setUp(self) -> None:
        self.root = Node("(root)", NodeKind.FOLDER)
        self.a = Node("A", NodeKind.FOLDER)
        self.b = Node("B", NodeKind.FOLDER)
        self.f = Node("file.txt", NodeKind.FILE, 3)
        self.root.add_child(self.a)
        self.a.add_child(self.b)
        self.a.add_child(self.f)

    def test_not_root(self) -> None:
        with self.assertRaises(InvalidStateError):
            validate_not_root(self.root, self.root, "RENAME")
        validate_not_root(self.root, self.a, "RENAME")

    def test_can_have_children(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            validate_can_have_children(self.f, "New parent")
        validate_can_have_children(self.a, "New parent")

    def test_cycle(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            validate_move_no_cycle(self.a, self.a)
        with self.assertRaises(InvalidArgumentError):
            validate_move_no_cycle(self.a, self.b)
        validate_move_no_cycle(self.b, self.root)

    def test_unique_name(self) -> None:
        with self.assertRaises(DuplicateNameError):
            validate_unique_name(self.a, "FILE.TXT")
        validate_unique_name(self.a, "FILE.TXT", exclude=self.f)
        validate_unique_name(self.a, "other.txt")


if __name__ == "__main__":
    unittest.main()
