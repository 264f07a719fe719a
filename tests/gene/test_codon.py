import pytest

from inscripta.biolib.constants import gencode
from inscripta.biolib.gene.codon import Codon


class TestCodon:
    def test__init__(self):
        # case-insensitive
        obs = Codon("uCg")
        assert obs.value == "UCG"
        assert obs.name == "UCG"

    def test_dna_codon_is_rna_codon(self):
        assert Codon("ATG") is Codon("AUG")
        assert str(Codon("tgg")) == "UGG"

    @pytest.mark.parametrize(
        "codon_str, exp_err",
        [
            ("A", ValueError),
            ("AG", ValueError),
            ("AGUC", ValueError),
            ("UCCUA", ValueError),
            ("GC-", ValueError),
            ("FRU", ValueError),
            ("NNN", ValueError),
        ],
    )
    def test__init__errors(self, codon_str, exp_err):
        with pytest.raises(exp_err):
            Codon(codon_str)

    def test_singletons(self):
        obs1 = Codon("AAA")
        obs2 = Codon("AAA")
        obs3 = Codon("AAU")
        assert obs1 is obs2
        assert obs2 is not obs3

    @pytest.mark.parametrize("codon_str", ["FRU", "NNN", "AUGA"])
    def test_rejected_codons_are_not_cached(self, codon_str):
        with pytest.raises(ValueError):
            Codon(codon_str)
        assert codon_str not in Codon._singletons_

    def test__repr__(self):
        assert repr(Codon("GcU")) == "<Codon.GCU: GCU>"

    def test__hash__(self):
        assert hash(Codon("GgC")) == hash("GGC")

    @pytest.mark.parametrize(
        "codon,expected",
        [
            (Codon("AAA"), "K"),
            (Codon("AUG"), "M"),
            (Codon("UGG"), "W"),
            (Codon("UGA"), "*"),
            (Codon("UAA"), "*"),
            (Codon("UAG"), "*"),
        ],
    )
    def test_translate(self, codon, expected):
        assert codon.translate() == expected

    def test_table_is_complete(self):
        assert len(gencode) == 64
        assert len(set(gencode.values())) == 21

    @pytest.mark.parametrize(
        "codon, include_self, expected",
        [
            (Codon("AUG"), False, []),
            (Codon("AUG"), True, [Codon("AUG")]),
            (Codon("UGG"), False, []),
            (Codon("UUU"), False, [Codon("UUC")]),
            (Codon("UUU"), True, [Codon("UUC"), Codon("UUU")]),
            (Codon("UAA"), False, [Codon("UAG"), Codon("UGA")]),
        ],
    )
    def test_synonymous_codons(self, codon, include_self, expected):
        assert codon.synonymous_codons(include_self=include_self) == expected

    @pytest.mark.parametrize(
        "codon,expected",
        [(Codon("UAA"), True), (Codon("UAG"), True), (Codon("UGA"), True), (Codon("UGG"), False)],
    )
    def test_is_stop_codon(self, codon, expected):
        assert codon.is_stop_codon is expected

    def test_is_start_codon(self):
        assert Codon("AUG").is_start_codon
        assert not Codon("GUG").is_start_codon
