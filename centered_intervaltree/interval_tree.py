import enum
import logging
from typing import Any, Iterator, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class IntervalTreeError(Exception):
    pass


class InvalidBoundsError(IntervalTreeError, ValueError):
    @classmethod
    def make_from(cls, min, max):
        return cls(
            f"Interval tree min must be numerically less than its max: ({min}, {max})"
        )


class InvalidIntervalError(IntervalTreeError, ValueError):
    @classmethod
    def make_from(cls, start, end):
        return cls(
            f"Interval start must be numerically less than its end: ({start}, {end})"
        )


class Interval(NamedTuple):
    """Half-open interval [start, end) with an opaque payload."""

    start: int
    end: int
    data: Any = None

    def covers(self, x):
        return self.start <= x < self.end


class SlotState(enum.Enum):
    EMPTY = "empty"
    HOLDING = "holding"
    RETIRED = "retired"


class IntervalTree(object):
    """
    Centered interval tree over the integer domain [min, max).

    Every node splits its domain at ``center``: intervals which end at or
    before the center go to the left child, intervals which start after it go
    to the right child, the rest are kept by the node itself in two lists.
    A node which ever received a single interval keeps it in a slot and builds
    no substructure until a second interval arrives.

    Intervals are added without keeping the lists ordered,
    ``sort`` must be called once the batch is inserted and before querying.

    >>> tree = IntervalTree(0, 100)
    >>> tree.add_interval(10, 25)
    >>> tree.add_interval(15, 27, "b")
    >>> tree.sort()
    >>> sorted(tree.query(24))
    [Interval(start=10, end=25, data=None), Interval(start=15, end=27, data='b')]
    >>> tree.query(27)
    []
    """

    __slots__ = (
        "min",
        "max",
        "center",
        "state",
        "single_interval",
        "left",
        "right",
        "mid_sorted_by_start",
        "mid_sorted_by_end",
        "out_of_domain",
    )

    def __init__(self, min, max):
        if not min < max:
            raise InvalidBoundsError.make_from(min, max)
        self.min = min
        self.max = max
        self.center = (min + max) // 2
        self.state = SlotState.EMPTY
        self.single_interval: Optional[Interval] = None
        self.left: Optional["IntervalTree"] = None
        self.right: Optional["IntervalTree"] = None
        self.mid_sorted_by_start: List[Interval] = []
        self.mid_sorted_by_end: List[Interval] = []
        # only used by nodes of width 1, which never get children
        self.out_of_domain: List[Interval] = []

    def __str__(self):
        return f"[{self.min}, {self.max})"

    def __repr__(self):
        return "<IntervalTree {} center={} size={}>".format(
            self, self.center, len(self)
        )

    @classmethod
    def from_intervals(cls, min, max, intervals):
        """
        Parameters
        ----------
        min: int
        max: int
        intervals: Iterable[tuple]
            (start, end) or (start, end, data) records

        Returns
        -------
        IntervalTree
            Sorted tree, ready for querying
        """
        tree = cls(min, max)
        for interval in intervals:
            tree.add_interval(*interval)
        tree.sort()
        return tree

    def add_interval(self, start, end, data=None):
        """
        Inserts an interval to the tree, the mid lists stay unordered
        until ``sort`` is called.

        Parameters
        ----------
        start: int
        end: int
        data: Any
            payload returned back with the interval, never inspected

        Raises
        ------
        InvalidIntervalError
            when end <= start, the tree is left untouched
        """
        if end <= start:
            logger.debug("Rejected interval (%s, %s) in %s", start, end, self)
            raise InvalidIntervalError.make_from(start, end)
        self._insert(Interval(start, end, data))

    def _insert(self, interval):
        node = self
        while node is not None:
            node = node._route(interval)

    def _route(self, interval):
        """
        Places the interval at this node or hands it down.

        Returns
        -------
        Optional[IntervalTree]
            child which must receive the interval, None when it was stored here
        """
        if self.state is SlotState.EMPTY:
            self.single_interval = interval
            self.state = SlotState.HOLDING
            return None

        if self.state is SlotState.HOLDING:
            previous, self.single_interval = self.single_interval, None
            self.state = SlotState.RETIRED
            logger.debug("Retired single interval of %s, center=%s", self, self.center)
            child = self._route_structural(previous)
            if child is not None:
                child._insert(previous)

        return self._route_structural(interval)

    def _route_structural(self, interval):
        straddles = interval.start <= self.center < interval.end
        if not straddles and self.max - self.min == 1:
            self.out_of_domain.append(interval)
            return None

        if interval.end <= self.center:
            if self.left is None:
                self.left = IntervalTree(self.min, self.center)
                logger.debug("Created left child %s of %s", self.left, self)
            return self.left

        if interval.start > self.center:
            if self.right is None:
                self.right = IntervalTree(self.center, self.max)
                logger.debug("Created right child %s of %s", self.right, self)
            return self.right

        self.mid_sorted_by_start.append(interval)
        self.mid_sorted_by_end.append(interval)
        return None

    def sort(self):
        """Must be invoked after all intervals have been added."""
        if self.state is not SlotState.RETIRED:
            return  # nothing to order for empty and single interval nodes
        self.mid_sorted_by_start.sort(key=lambda i: i.start)
        self.mid_sorted_by_end.sort(key=lambda i: i.end, reverse=True)
        if self.left is not None:
            self.left.sort()
        if self.right is not None:
            self.right.sort()

    def query(self, x):
        """
        Returns all intervals which cover the point, i.e. start <= x < end.
        The order of the result is not defined.

        Parameters
        ----------
        x: int

        Returns
        -------
        List[Interval]
        """
        result = []
        self._query(x, result)
        return result

    def _query(self, x, result):
        if self.state is SlotState.EMPTY:
            return

        if self.state is SlotState.HOLDING:
            if self.single_interval.covers(x):
                result.append(self.single_interval)
            return

        result.extend(i for i in self.out_of_domain if i.covers(x))
        if x < self.center:
            if self.left is not None:
                self.left._query(x, result)
            # every mid interval ends after the center, only start can fail
            for interval in self.mid_sorted_by_start:
                if interval.start > x:
                    break
                result.append(interval)
            return

        # every mid interval starts at or before the center, only end can fail
        for interval in self.mid_sorted_by_end:
            if interval.end <= x:
                break
            result.append(interval)
        if self.right is not None:
            self.right._query(x, result)

    def __len__(self):
        if self.state is SlotState.EMPTY:
            return 0
        if self.state is SlotState.HOLDING:
            return 1

        size = len(self.mid_sorted_by_start) + len(self.out_of_domain)
        if self.left is not None:
            size += len(self.left)
        if self.right is not None:
            size += len(self.right)
        return size

    def __iter__(self) -> Iterator[Interval]:
        if self.state is SlotState.EMPTY:
            return
        if self.state is SlotState.HOLDING:
            yield self.single_interval
            return

        if self.left is not None:
            yield from self.left
        if self.right is not None:
            yield from self.right
        yield from self.mid_sorted_by_start
        yield from self.out_of_domain

