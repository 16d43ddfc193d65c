# drills

A collection of small, self-contained algorithms and utilities, each in its
own module and each backed by tests. It has no runtime dependencies and
supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line: `minigrep`

Print every line of a file that contains a query string:

```
minigrep QUERY FILE
```

The command first prints `Searching for QUERY` and `In file FILE`, then each
matching line. The file is read as UTF-8. By default the match is
case-sensitive. Set the `IGNORE_CASE` environment variable (any value) to
match regardless of case:

```
IGNORE_CASE=1 minigrep rust poem.txt
```

If the query or file path is missing, or the file cannot be read or decoded,
an error is written to standard error and the command exits with status 1.

## Library

### Text search — `drills.minigrep`

```python
from drills.minigrep import search, search_case_insensitive

text = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."
search("duct", text)                   # ['safe, fast, productive.']
search_case_insensitive("rUsT", text)  # ['Rust:', 'Trust me.']
```

`Config.from_args(args, environ=None)` builds a frozen `Config` (`query`,
`file_path`, `ignore_case`) from an argument list whose first item is the
program name. `ignore_case` is true when `IGNORE_CASE` is a key of `environ`
(the process environment by default). A missing argument raises
`ConfigError`, a subclass of `ValueError`. `run(config)` reads the file and
prints the matching lines. `main(argv=None)` is the command's entry point and
returns its exit status.

### Collections — `drills.inventory`

- `Inventory(shirts)` holds a list of `ShirtColor` values (`RED`, `BLUE`).
  `giveaway(user_preference=None)` returns the preference, or
  `most_stocked()` when there is none; `most_stocked()` returns `RED` only
  when strictly more red shirts are stocked, otherwise `BLUE`.
- `sort_by_width(rectangles)` returns `Rectangle` values in stable order of
  width.
- `shoes_in_size(shoes, shoe_size)` keeps only the `Shoe` values of that size,
  in their original order.

### Quota tracking and trees — `drills.tracker`

`LimitTracker(messenger, maximum)` records a value with `set_value(value)` and
sends one message through its `Messenger` (an abstract class with a
`send(msg)` method) when the value reaches 75%, 90% or 100% of the maximum:

- at 100% or more: `Error: You are over your quota!`
- at 90% or more: `Urgent warning: You've used up over 90% of your quota!`
- at 75% or more: `Warning: You've used up over 75% of your quota!`

`Node(value, children=())` forms a tree in which a node owns its children and
holds only a weak reference to its parent. `add_child(child)` adopts a node;
`parent()` returns the parent, or `None` once it no longer exists.

### Threads — `drills.concurrency`

- `count_with_threads(workers=10)` starts `workers` threads that each add one
  to a shared counter under a lock, and returns the total.
- `collect_messages(batches, delay=1.0)` sends each batch of messages from its
  own thread over a queue, pausing `delay` seconds after each message, and
  returns every message in the order received. A negative `delay` raises
  `ValueError`.

### Puzzles

| Module | Function | What it does |
| --- | --- | --- |
| `drills.vowels` | `max_freq_sum(s)` | highest vowel (`aeiou`) count plus highest count of any other character |
| `drills.regex_match` | `is_match(s, p)` | whole-string match where `.` is any character and `*` repeats the element before it |
| `drills.linked_list` | `merge_k_lists(lists)` | merge sorted linked lists into one, relinking the nodes |
| `drills.linked_list` | `reverse_k_group(head, k)` | reverse nodes in groups of `k`, leaving a shorter tail as it is |
| `drills.median` | `find_median_sorted_arrays(nums1, nums2)` | median of two sorted sequences in logarithmic time |
| `drills.substring` | `find_substring(s, words)` | start indices of every concatenation of all equal-length `words` |

`is_match` raises `ValueError` for a pattern starting with `*`;
`match_char(sc, pc)` is the single-character test it uses.
`find_median_sorted_arrays` raises `ValueError` when both sequences are empty
or they are not sorted. `find_substring` groups its indices by offset modulo
the word length, rising within each group.

`ListNode(val, next=None)` is the linked-list node. `ListNode.from_iterable`
builds a list (or `None` for no values), iterating a node yields its values,
and `to_list(head)` returns them as a list.

```python
from drills.linked_list import ListNode, merge_k_lists, to_list

merged = merge_k_lists([
    ListNode.from_iterable([1, 4, 5]),
    ListNode.from_iterable([1, 3, 4]),
    ListNode.from_iterable([2, 6]),
])
to_list(merged)  # [1, 1, 2, 3, 4, 4, 5, 6]
```