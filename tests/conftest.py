"""Hypothesis strategies and pytest fixtures for faultline.

Strategies produce the raw material of classification: typed tags,
free-form detail values and foreign exceptions usable as causes.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from faultline.core.attributes import Code, Func, Kind, Mod, Obj, Op, Tag

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

TAG_TYPES: tuple[type[Tag], ...] = (Mod, Func, Op, Obj, Kind, Code)


def nonempty_text(max_size: int = 30) -> SearchStrategy[str]:
    """Non-empty printable strings."""
    return st.text(
        alphabet=st.characters(whitelist_categories=("L", "N", "P", "S", "Zs")),
        min_size=1,
        max_size=max_size,
    )


def detail_texts() -> SearchStrategy[str]:
    """Detail strings, possibly empty, with separator characters only inside."""
    return st.text(alphabet=st.sampled_from("abcXYZ019 ;,.-"), max_size=20).map(
        lambda s: s.strip("; ")
    )


# ===================================================================
# ATTRIBUTE STRATEGIES
# ===================================================================


def tags(tag_type: type[Tag] | None = None) -> SearchStrategy[Tag]:
    """A non-empty tag of the given type (or of any type)."""
    types = st.just(tag_type) if tag_type is not None else st.sampled_from(TAG_TYPES)
    return st.builds(lambda t, v: t(v), types, nonempty_text())


def foreign_errors() -> SearchStrategy[Exception]:
    """Plain (non-faultline) exceptions with a text message."""
    return st.builds(ValueError, nonempty_text())


def attributes() -> SearchStrategy[object]:
    """Any value E() accepts, excluding None."""
    return st.one_of(
        tags(),
        detail_texts(),
        st.integers(),
        st.floats(allow_nan=False),
        foreign_errors(),
    )
