"""Tests for the pure filter, sort and suggestion functions."""
import unittest

from pydantic import ValidationError

from tasknote.models.task import Priority
from tasknote.services.filters import (
    SortOption,
    TaskFilter,
    apply_filters,
    apply_filters_and_sort,
    move_positions,
    search_suggestions,
    sort_tasks,
)
from tests.helpers import make_task


def titles(tasks):
    return [t.title for t in tasks]


class TaskFilterTests(unittest.TestCase):
    def setUp(self):
        self.tasks = [
            make_task(1, "Buy milk", "From the corner shop", Priority.LOW, "Personal"),
            make_task(2, "Write report", "Quarterly numbers", Priority.HIGH, "Work"),
            make_task(3, "Call plumber", "Kitchen sink", Priority.URGENT, "Home", is_completed=True),
            make_task(4, "Plan sprint", "Milestones for the team", Priority.MEDIUM, "Work"),
        ]

    def test_default_filter_lets_everything_through(self):
        """With no active filters every task is kept"""
        task_filter = TaskFilter()
        self.assertFalse(task_filter.is_filtering)
        self.assertEqual(len(apply_filters(self.tasks, task_filter)), 4)

    def test_search_matches_title_or_description_case_insensitively(self):
        """Search text matches title or description ignoring case"""
        result = apply_filters(self.tasks, TaskFilter(search_text="MILK"))
        self.assertEqual(titles(result), ["Buy milk"])

        result = apply_filters(self.tasks, TaskFilter(search_text="milestones"))
        self.assertEqual(titles(result), ["Plan sprint"])

    def test_category_filter(self):
        result = apply_filters(self.tasks, TaskFilter(selected_categories={"Work"}))
        self.assertEqual(titles(result), ["Write report", "Plan sprint"])

    def test_priority_filter(self):
        result = apply_filters(
            self.tasks,
            TaskFilter(selected_priorities={Priority.LOW, Priority.URGENT}),
        )
        self.assertEqual(titles(result), ["Buy milk", "Call plumber"])

    def test_hide_completed(self):
        result = apply_filters(self.tasks, TaskFilter(show_completed=False))
        self.assertNotIn("Call plumber", titles(result))
        self.assertEqual(len(result), 3)

    def test_filters_are_conjunctive(self):
        """Every shown task satisfies every active predicate"""
        task_filter = TaskFilter(
            search_text="r",
            selected_categories={"Work", "Home"},
            selected_priorities={Priority.HIGH, Priority.URGENT, Priority.MEDIUM},
            show_completed=False,
        )
        result = apply_filters(self.tasks, task_filter)
        self.assertEqual(titles(result), ["Write report", "Plan sprint"])
        for task in result:
            self.assertIn("r", (task.title + task.description).lower())
            self.assertIn(task.category, {"Work", "Home"})
            self.assertFalse(task.is_completed)

    def test_projection_is_subset_of_input(self):
        """Filtering never invents or duplicates tasks"""
        result = apply_filters_and_sort(self.tasks, TaskFilter(search_text="a"))
        ids = [t.id for t in result]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertTrue(set(ids) <= {t.id for t in self.tasks})

    def test_unknown_parameter_rejected(self):
        with self.assertRaises(ValidationError):
            TaskFilter(colour="red")


class SortTaskTests(unittest.TestCase):
    def test_priority_sort_highest_first_then_manual_order(self):
        tasks = [
            make_task(1, "a", priority=Priority.LOW, order_index=0),
            make_task(2, "b", priority=Priority.URGENT, order_index=3),
            make_task(3, "c", priority=Priority.HIGH, order_index=2),
            make_task(4, "d", priority=Priority.HIGH, order_index=1),
        ]
        result = sort_tasks(tasks, SortOption.PRIORITY)
        self.assertEqual(titles(result), ["b", "d", "c", "a"])

    def test_due_date_sort_puts_undated_last(self):
        tasks = [
            make_task(1, "none-1"),
            make_task(2, "later", due_in_days=3),
            make_task(3, "none-2"),
            make_task(4, "sooner", due_in_days=1),
        ]
        result = sort_tasks(tasks, SortOption.DUE_DATE)
        self.assertEqual(titles(result), ["sooner", "later", "none-1", "none-2"])

    def test_creation_date_sort_newest_first(self):
        tasks = [
            make_task(1, "oldest", created_minutes_ago=30),
            make_task(2, "newest", created_minutes_ago=1),
            make_task(3, "middle", created_minutes_ago=10),
        ]
        result = sort_tasks(tasks, SortOption.CREATION_DATE)
        self.assertEqual(titles(result), ["newest", "middle", "oldest"])

    def test_alphabetical_sort_ignores_case(self):
        tasks = [make_task(1, "banana"), make_task(2, "Apple"), make_task(3, "cherry")]
        result = sort_tasks(tasks, SortOption.ALPHABETICAL)
        self.assertEqual(titles(result), ["Apple", "banana", "cherry"])

    def test_manual_sort_uses_order_index(self):
        tasks = [
            make_task(1, "second", order_index=1),
            make_task(2, "third", order_index=2),
            make_task(3, "first", order_index=0),
        ]
        result = sort_tasks(tasks, SortOption.MANUAL)
        self.assertEqual(titles(result), ["first", "second", "third"])

    def test_sort_is_a_permutation(self):
        """Sorting keeps every task exactly once"""
        tasks = [make_task(i, f"t{i}", priority=p) for i, p in enumerate(Priority)]
        for option in SortOption:
            result = sort_tasks(tasks, option)
            self.assertEqual(sorted(t.id for t in result), sorted(t.id for t in tasks), option)

    def test_unknown_sort_option(self):
        with self.assertRaises(ValueError):
            sort_tasks([], "random")


class SearchSuggestionTests(unittest.TestCase):
    def setUp(self):
        self.tasks = [
            make_task(1, "Buy Milk", "Also bread"),
            make_task(2, "Buy Bread", ""),
            make_task(3, "Mix paint", "Milky white for the hall"),
        ]

    def test_words_containing_text_are_suggested(self):
        """Only words longer than two characters containing the text"""
        self.assertEqual(search_suggestions(self.tasks, "mil"), ["Milk", "Milky"])

    def test_suggestions_are_deduplicated_and_sorted(self):
        result = search_suggestions(self.tasks, "bread")
        self.assertEqual(result, ["Bread", "bread"])
        self.assertEqual(search_suggestions(self.tasks, "bu"), ["Buy"])

    def test_short_words_are_skipped(self):
        tasks = [make_task(1, "Go to gym")]
        self.assertEqual(search_suggestions(tasks, "o"), [])

    def test_empty_text_gives_no_suggestions(self):
        self.assertEqual(search_suggestions(self.tasks, ""), [])

    def test_limit(self):
        tasks = [make_task(i, f"word{i}") for i in range(10)]
        self.assertEqual(len(search_suggestions(tasks, "word", limit=5)), 5)


class MovePositionsTests(unittest.TestCase):
    def test_move_single_item_to_end(self):
        self.assertEqual(move_positions(["a", "b", "c"], [0], 2), ["b", "c", "a"])

    def test_move_single_item_to_front(self):
        self.assertEqual(move_positions(["a", "b", "c"], [2], 0), ["c", "a", "b"])

    def test_moved_items_keep_relative_order(self):
        result = move_positions(["a", "b", "c", "d", "e"], [3, 0], 1)
        self.assertEqual(result, ["b", "a", "d", "c", "e"])

    def test_destination_is_clamped(self):
        self.assertEqual(move_positions(["a", "b", "c"], [0], 99), ["b", "c", "a"])
        self.assertEqual(move_positions(["a", "b", "c"], [2], -4), ["c", "a", "b"])

    def test_result_is_a_permutation(self):
        items = list(range(6))
        result = move_positions(items, [1, 4], 2)
        self.assertEqual(sorted(result), items)

    def test_out_of_range_position(self):
        with self.assertRaises(IndexError):
            move_positions(["a", "b"], [2], 0)
