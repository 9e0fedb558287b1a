"""
Tests for the clue -> suspect hash table.
"""

import pytest

from evidence_index import EvidenceIndex, djb2


class TestDjb2:
    """Test the DJB2 string hash."""

    def test_empty_string_is_seed(self):
        assert djb2("") == 5381

    def test_single_byte(self):
        assert djb2("a") == 5381 * 33 + ord("a")

    def test_deterministic(self):
        assert djb2("Vidro quebrado") == djb2("Vidro quebrado")

    def test_hashes_utf8_bytes(self):
        """Accented characters contribute their UTF-8 bytes, not code points."""
        expected = 5381
        for byte in "é".encode("utf-8"):
            expected = expected * 33 + byte
        assert djb2("é") == expected

    def test_stays_within_64_bits(self):
        assert 0 <= djb2("x" * 500) < 2 ** 64

    def test_bucket_in_range(self):
        index = EvidenceIndex(table_size=7)
        for key in ["a", "Faca com impressões", "Pegada pequena", "zzz"]:
            assert 0 <= index.hash(key) < 7


class TestPutGet:
    """Test insert-or-replace and lookup."""

    def test_get_after_put(self):
        index = EvidenceIndex()
        index.put("Fibra vermelha", "Sra. Rosa")
        assert index.get("Fibra vermelha") == "Sra. Rosa"

    def test_miss_returns_none(self):
        index = EvidenceIndex()
        index.put("Fibra vermelha", "Sra. Rosa")
        assert index.get("Carta rasgada") is None

    def test_lookup_is_exact(self):
        index = EvidenceIndex()
        index.put("Fibra vermelha", "Sra. Rosa")
        assert index.get("fibra vermelha") is None

    def test_replace_does_not_duplicate(self):
        index = EvidenceIndex()
        index.put("Carta rasgada", "Sr. Preto")
        length_before = index.chain_length("Carta rasgada")

        index.put("Carta rasgada", "Dr. Azul")

        assert index.get("Carta rasgada") == "Dr. Azul"
        assert index.chain_length("Carta rasgada") == length_before
        assert len(index) == 1

    def test_empty_key_or_value_is_ignored(self):
        index = EvidenceIndex()
        index.put("", "Sr. Verde")
        index.put("Pegadas lamacentas", "")
        assert len(index) == 0
        assert index.get("Pegadas lamacentas") is None
        assert index.get("") is None

    def test_contains(self):
        index = EvidenceIndex()
        index.put("Livro deslocado", "Sra. Rosa")
        assert "Livro deslocado" in index
        assert "Frascos vazios" not in index
        assert 42 not in index


class TestCollisions:
    """A single bucket forces every key into one chain."""

    def test_chained_keys_stay_distinct(self):
        index = EvidenceIndex(table_size=1)
        index.put("Pegadas lamacentas", "Sr. Verde")
        index.put("Vidro quebrado", "Sra. Rosa")
        index.put("Faca com impressões", "Sr. Preto")

        assert index.chain_length("anything") == 3
        assert index.get("Pegadas lamacentas") == "Sr. Verde"
        assert index.get("Vidro quebrado") == "Sra. Rosa"
        assert index.get("Faca com impressões") == "Sr. Preto"

    def test_replace_inside_chain(self):
        index = EvidenceIndex(table_size=1)
        index.put("a", "Sr. Verde")
        index.put("b", "Sra. Rosa")
        index.put("a", "Dr. Azul")

        assert index.chain_length("a") == 2
        assert index.get("a") == "Dr. Azul"
        assert index.get("b") == "Sra. Rosa"

    def test_miss_in_populated_chain(self):
        index = EvidenceIndex(table_size=1)
        index.put("a", "Sr. Verde")
        assert index.get("b") is None


class TestConstruction:
    """Test table sizing and bulk loading."""

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            EvidenceIndex(table_size=0)

    def test_default_size(self):
        assert EvidenceIndex().table_size == 101

    def test_from_pairs_last_wins(self):
        index = EvidenceIndex.from_pairs([("a", "Sr. Verde"), ("a", "Sra. Rosa")])
        assert index.get("a") == "Sra. Rosa"
        assert len(index) == 1

    def test_scenario_index_has_all_pairs(self, index, scenario):
        assert len(index) == 9
        for clue, suspect in scenario.clue_suspects.items():
            assert index.get(clue) == suspect
        assert sorted(index.items()) == sorted(scenario.clue_suspects.items())
