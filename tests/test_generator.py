"""Unit tests for vecviz.generator."""

from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from vecviz.generator import (
    ATTRIBUTES,
    CLUSTER_NAMES,
    DEPARTMENTS,
    KEY_ALPHABET,
    NAMES,
    PRIORITIES,
    RATINGS,
    REGIONS,
    STATUSES,
    _pick_subset,
    generate,
    make_cluster_centers,
)
from vecviz.types import InvalidArgument

DIM = 12
NOW = datetime(2026, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="module")
def batch():
    return generate(300, DIM, seed=7, now=NOW)


# ---------------------------------------------------------------------------
# Sizes and validation
# ---------------------------------------------------------------------------


def test_count_and_dimensions(batch):
    assert len(batch) == 300
    assert all(len(item.vector) == DIM for item in batch)


def test_zero_count():
    assert generate(0, 100) == []


@pytest.mark.parametrize("dims", [0, -3])
def test_bad_dimensions(dims):
    with pytest.raises(InvalidArgument, match="dimensions"):
        generate(5, dims)


def test_negative_count():
    with pytest.raises(InvalidArgument, match="count"):
        generate(-1, 10)


def test_non_integer_size():
    with pytest.raises(InvalidArgument, match="integer"):
        generate(2.5, 10)


def test_ids_are_ordinals(batch):
    assert [item.id for item in batch] == [str(i) for i in range(len(batch))]


def test_keys(batch):
    for item in batch:
        assert len(item.key) == 8
        assert set(item.key) <= set(KEY_ALPHABET)


# ---------------------------------------------------------------------------
# Clusters and vectors
# ---------------------------------------------------------------------------


def test_clusters_distinct_and_known(batch):
    for item in batch:
        assert 1 <= len(item.clusters) <= 3
        assert len(set(item.clusters)) == len(item.clusters)
        assert set(item.clusters) <= set(CLUSTER_NAMES)


def test_cluster_subset_sizes_all_occur(batch):
    assert {len(item.clusters) for item in batch} == {1, 2, 3}


def test_vector_bounds(batch):
    for item in batch:
        assert all(-1.25 <= v <= 1.25 for v in item.vector)


def test_members_share_primary_center(batch):
    by_primary = {}
    for item in batch:
        by_primary.setdefault(item.clusters[0], []).append(item.np_vector)
    for vectors in by_primary.values():
        arr = np.vstack(vectors)
        # per dimension, members spread at most the width of the noise band
        assert float((arr.max(axis=0) - arr.min(axis=0)).max()) <= 0.5 + 1e-9


def test_cluster_centers_shape_and_range():
    rng = np.random.default_rng(0)
    centers = make_cluster_centers(rng, DIM)
    assert centers.shape == (len(CLUSTER_NAMES), DIM)
    assert centers.min() >= -1.0 and centers.max() <= 1.0
    assert not centers.flags.writeable


def test_pick_subset_no_duplicates():
    rng = np.random.default_rng(3)
    for _ in range(200):
        picked = _pick_subset(rng, ATTRIBUTES, 0, 5)
        assert 0 <= len(picked) <= 5
        assert len(set(picked)) == len(picked)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


def test_metadata_vocabularies(batch):
    for item in batch:
        m = item.metadata
        attribute, _, greek = m.name.rpartition(" ")
        assert attribute in ATTRIBUTES and greek in NAMES
        assert m.rating in RATINGS
        assert m.status in STATUSES
        assert m.priority in PRIORITIES
        assert m.region in REGIONS
        assert m.department in DEPARTMENTS
        assert 1 <= m.score <= 100
        assert 10.0 <= m.value < 1000.0
        assert round(m.value, 2) == m.value
        assert len(m.tags) <= 5 and len(set(m.tags)) == len(m.tags)
        assert set(m.tags) <= set(ATTRIBUTES)


def test_created_within_past_year(batch):
    for item in batch:
        created = datetime.strptime(item.metadata.created, "%Y-%m-%dT%H:%M:%SZ")
        created = created.replace(tzinfo=timezone.utc)
        assert NOW - timedelta(days=365) <= created <= NOW


def test_is_active_rate():
    items = generate(2000, 3, seed=11, now=NOW)
    rate = sum(item.metadata.is_active for item in items) / len(items)
    assert 0.75 < rate < 0.85


# ---------------------------------------------------------------------------
# Reproducibility
# ---------------------------------------------------------------------------


def test_same_seed_same_output():
    a = generate(50, DIM, seed=123, now=NOW)
    b = generate(50, DIM, seed=123, now=NOW)
    assert a == b


def test_different_seed_different_output():
    a = generate(20, DIM, seed=1, now=NOW)
    b = generate(20, DIM, seed=2, now=NOW)
    assert a != b


def test_explicit_rng():
    a = generate(10, DIM, rng=np.random.default_rng(5), now=NOW)
    b = generate(10, DIM, seed=5, now=NOW)
    assert a == b


def test_global_rng_untouched():
    np.random.seed(999)
    before = np.random.get_state()
    generate(10, DIM, seed=1)
    after = np.random.get_state()
    assert np.array_equal(before[1], after[1])
