"""
Search for occurrences of a pattern in a string with the
Knuth-Morris-Pratt algorithm.

The module provides:
- build_failure_table: the LPS (longest prefix-suffix) table of a pattern.
- find_all_occurrences: every start offset of a pattern in a text.
- search: case sensitivity, 'first'/'last' direction and a result limit
  on top of the matcher.
"""
import logging
import time
from functools import wraps
from typing import List, Optional

logger = logging.getLogger(__name__)

SUPPORT_METHODS = {'first', 'last'}


def log_time_decorator(func):
    """Decorator that logs the execution time of a function."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        end = time.perf_counter()
        logger.debug("%s finished in %.6f s", func.__name__, end - start)
        return result

    return wrapper


def build_failure_table(pattern: str) -> List[int]:
    """
    Build the LPS table for a pattern.

    Entry ``k`` is the length of the longest proper prefix of
    ``pattern[:k + 1]`` that is also its suffix.

    :param pattern: Pattern string, may be empty
    :return: List of len(pattern) integers, empty for an empty pattern
    """
    lps = [0] * len(pattern)
    length = 0  # length of the current matched prefix
    i = 1

    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            # try the next shorter border, i stays in place
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def find_all_occurrences(text: str, pattern: str,
                         max_results: Optional[int] = None) -> List[int]:
    """
        Find a substring in a string with the Knuth-Morris-Pratt (KMP) algorithm.

        The LPS table lets the scan fall back inside the pattern on a
        mismatch instead of re-reading text characters, which keeps the
        search linear: O(n + m), where
            n is the length of the text,
            m is the length of the pattern.

        Parameters:
            text (str): the string to search in.
            pattern (str): the substring to look for.
            max_results (Optional[int]): maximum number of occurrences.
                None means no limit.

        Returns:
            List[int]: start offsets of the pattern in `text`, ascending.
                Overlapping occurrences are all reported. An empty pattern
                or an empty text gives an empty list.
        """
    if max_results is not None and max_results < 0:
        raise ValueError(f'max_results must be non-negative, got {max_results}')

    if not pattern or not text or max_results == 0:
        return []

    n = len(text)
    m = len(pattern)
    lps = build_failure_table(pattern)

    results = []
    i = j = 0  # i indexes text, j indexes pattern
    while i < n:
        if text[i] == pattern[j]:
            i += 1
            j += 1

        if j == m:
            results.append(i - j)
            if max_results is not None and len(results) >= max_results:
                return results
            # keep the border so overlapping matches are found
            j = lps[j - 1]
        elif i < n and text[i] != pattern[j]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1

    return results


def _search_last(text: str, pattern: str, count: Optional[int]) -> List[int]:
    """Find the last occurrences by running the matcher on reversed input."""
    rev_indices = find_all_occurrences(text[::-1], pattern[::-1], count)
    return [len(text) - rev_idx - len(pattern) for rev_idx in rev_indices]


@log_time_decorator
def search(string: str,
           pattern: str,
           case_sensitivity: bool = True,
           method: str = 'first',
           count: Optional[int] = None
) -> List[int]:
    """
    Find occurrences of a pattern in a string with the KMP algorithm.

    Supports case sensitivity, a limit on the number of occurrences and
    the search direction (first/last).

    :param string: Source string.
    :param pattern: Pattern to look for.
    :param case_sensitivity: True - respect case, False - ignore it.
    :param method: Search direction: 'first' (from the start, ascending
                   offsets) or 'last' (from the end, descending offsets).
    :param count: Maximum number of occurrences, None for all of them.
    :return: List of start offsets, empty if nothing was found.
    """
    if method not in SUPPORT_METHODS:
        raise ValueError(f'Unsupported search method {method!r}')
    if count is not None and count < 0:
        raise ValueError(f'count must be non-negative, got {count}')

    text_to_search = string if case_sensitivity else string.lower()
    work_pattern = pattern if case_sensitivity else pattern.lower()

    if method == 'first':
        return find_all_occurrences(text_to_search, work_pattern, count)
    return _search_last(text_to_search, work_pattern, count)
