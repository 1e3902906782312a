"""Completion ranking."""
from .ranker import CandidateSource, CompletionCandidate, make_sort_text, rank_candidates

__all__ = ['CandidateSource', 'CompletionCandidate', 'make_sort_text', 'rank_candidates']
