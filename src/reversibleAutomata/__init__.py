from .automaton import Automaton
from .cell import Cell, rule_lkt
from .config import MAX_SIZE, AutomatonConfig, load_config
from .errors import DomainError
from .extraction import extract_rules
from .graph import are_isomorphic, find_cycles, permute_graph, render_graph
from .isomorphism import enumerate_isomorphic_rule_vectors, exists_isomorphism
from .neighborhood import NeighborhoodResolver
from .results import AnalysisTable, IsomorphismMatch, ReversalReport, ReversedIsomorphism
from .reversal import explore_reversed_isomorphisms, has_non_trivial_reversed_isomorphisms
from .rule_vector import RuleVector

__all__ = [
    "MAX_SIZE",
    "AnalysisTable",
    "Automaton",
    "AutomatonConfig",
    "Cell",
    "DomainError",
    "IsomorphismMatch",
    "NeighborhoodResolver",
    "ReversalReport",
    "ReversedIsomorphism",
    "RuleVector",
    "are_isomorphic",
    "enumerate_isomorphic_rule_vectors",
    "exists_isomorphism",
    "explore_reversed_isomorphisms",
    "extract_rules",
    "find_cycles",
    "has_non_trivial_reversed_isomorphisms",
    "load_config",
    "permute_graph",
    "render_graph",
    "rule_lkt",
]
