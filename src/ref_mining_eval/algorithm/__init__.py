"""algorithm subpackage - comparator configuration and reference matching.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from ref_mining_eval.algorithm import match_refs
    from ref_mining_eval.relations import Position

    m = match_refs(
        [Position("A.java", 0, 5), Position("A.java", 10, 3)],
        [Position("A.java", 0, 5), Position("A.java", 20, 2)],
    )
    # m.exact == [A.java:(0,5)], m.left == [A.java:(10,3)], m.right == [A.java:(20,2)]
"""

from __future__ import annotations

from ref_mining_eval.algorithm.config import ComparatorConfig
from ref_mining_eval.algorithm.matcher import RefMatch, dedup_refs, group_by_file, match_refs

__all__ = ["ComparatorConfig", "RefMatch", "dedup_refs", "group_by_file", "match_refs"]
