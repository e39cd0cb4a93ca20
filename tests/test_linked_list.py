"""Unit tests for the singly linked list."""

from pybasics.data_structures.linked_list import LinkedList, main


class TestLinkedList:
    """Tests for LinkedList insert/delete/render."""

    def test_insert_appends_at_tail(self) -> None:
        """Test that insert keeps insertion order."""
        linked_list = LinkedList()
        for value in (1, 2, 3):
            linked_list.insert(value)

        assert linked_list.to_list() == [1, 2, 3]
        assert len(linked_list) == 3

    def test_delete_head(self) -> None:
        """Test deleting the head node."""
        linked_list = LinkedList()
        for value in (1, 2, 3):
            linked_list.insert(value)

        assert linked_list.delete(1) is True
        assert linked_list.to_list() == [2, 3]

    def test_delete_removes_only_first_match(self) -> None:
        """Test that only the first matching node is removed."""
        linked_list = LinkedList()
        for value in (1, 2, 3, 2):
            linked_list.insert(value)

        assert linked_list.delete(2) is True
        assert linked_list.to_list() == [1, 3, 2]

    def test_delete_missing_value_returns_false(self) -> None:
        """Test that deleting an absent value reports False and changes nothing."""
        linked_list = LinkedList()
        linked_list.insert(1)

        assert linked_list.delete(42) is False
        assert linked_list.to_list() == [1]

    def test_delete_on_empty_list(self) -> None:
        """Test that deleting from an empty list reports False."""
        assert LinkedList().delete(1) is False

    def test_render(self) -> None:
        """Test the arrow rendering of the chain."""
        linked_list = LinkedList()
        assert linked_list.render() == "nil"

        linked_list.insert(1)
        linked_list.insert(2)
        assert linked_list.render() == "1 -> 2 -> nil"


def test_main_output(capsys) -> None:
    """Test the demo prints the list before and after edits."""
    main()
    out = capsys.readouterr().out

    assert "Original List: 1 -> 2 -> 3 -> 4 -> nil" in out
    assert "After deleting 2: 1 -> 3 -> 4 -> nil" in out
    assert "After inserting 5: 1 -> 3 -> 4 -> 5 -> nil" in out
