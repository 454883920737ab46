from todo_lists.presentation import (
    completed_count,
    is_list_complete,
    list_class,
    remaining_count,
    sorted_lists,
    sorted_todos,
    summarize_list,
    total_todos,
)


def todo(todo_id, name, completed=False):
    return {"id": todo_id, "name": name, "completed": completed}


def make_list(list_id, name, todos):
    return {"id": list_id, "name": name, "todos": todos}


class TestCounts:
    def test_counts(self):
        lst = make_list(1, "Home", [todo(1, "a", True), todo(2, "b"), todo(3, "c")])
        assert total_todos(lst) == 3
        assert completed_count(lst) == 1
        assert remaining_count(lst) == 2

    def test_empty_list_is_not_complete(self):
        lst = make_list(1, "Empty", [])
        assert is_list_complete(lst) is False
        assert list_class(lst) is None

    def test_all_done_list_is_complete(self):
        lst = make_list(1, "Done", [todo(1, "a", True), todo(2, "b", True)])
        assert is_list_complete(lst) is True
        assert list_class(lst) == "complete"


class TestSorting:
    def test_sorted_todos_puts_completed_last(self):
        todos = [todo(1, "a", True), todo(2, "b")]
        assert [t["name"] for t in sorted_todos(todos)] == ["b", "a"]
        # storage order untouched
        assert [t["name"] for t in todos] == ["a", "b"]

    def test_sorted_todos_is_stable_and_keeps_ids(self):
        todos = [todo(1, "a", True), todo(2, "b"), todo(3, "c", True), todo(4, "d")]
        assert [t["id"] for t in sorted_todos(todos)] == [2, 4, 1, 3]

    def test_sorted_lists(self):
        done = make_list(1, "Done", [todo(1, "a", True)])
        empty = make_list(2, "Empty", [])
        open_ = make_list(3, "Open", [todo(1, "a")])
        lists = [done, empty, open_]
        assert [lst["id"] for lst in sorted_lists(lists)] == [2, 3, 1]
        assert [lst["id"] for lst in lists] == [1, 2, 3]


class TestSummary:
    def test_summarize_list(self):
        summary = summarize_list(make_list(4, "Groceries", [todo(1, "Milk", True)]))
        assert summary.id == 4
        assert summary.name == "Groceries"
        assert summary.total == 1
        assert summary.remaining == 0
        assert summary.completed == 1
        assert summary.is_complete is True
        assert summary.css_class == "complete"
