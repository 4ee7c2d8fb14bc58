from pathlib import Path

import pytest

from kmerfreq.configs import KmerConfig, MAX_KMER_SIZE


class TestKmerConfig:
    def test_defaults(self):
        cfg = KmerConfig(input_file="x.fa")
        assert cfg.kmer_size == 4
        assert cfg.format_hint is None
        assert cfg.universe_policy == "all"
        assert cfg.out_dir == Path.cwd() / "kmer-out"

    def test_k_too_large_names_value(self):
        with pytest.raises(ValueError, match=r"--kmer_size \(11\) must be less than 10"):
            KmerConfig(input_file="x.fa", kmer_size=11)

    def test_k_upper_bound_accepted(self):
        assert KmerConfig(input_file="x.fa", kmer_size=MAX_KMER_SIZE).kmer_size == 10

    @pytest.mark.parametrize("k", [0, -3])
    def test_k_too_small(self, k):
        with pytest.raises(ValueError, match="must be at least 1"):
            KmerConfig(input_file="x.fa", kmer_size=k)

    def test_format_hint_normalized(self):
        assert KmerConfig(input_file="x.fa", format_hint="FASTQ").format_hint == "fastq"

    @pytest.mark.parametrize("hint", ["fa", "fq", "fna", "bam", "whatever"])
    def test_any_format_hint_accepted(self, hint):
        """The hint is advisory: arbitrary values are stored, never rejected."""
        cfg = KmerConfig(input_file="x.fa", format_hint=hint)
        assert cfg.format_hint == hint
        assert cfg.kmer_size == 4 and cfg.universe_policy == "all"

    def test_unknown_policy(self):
        with pytest.raises(ValueError, match="universe_policy"):
            KmerConfig(input_file="x.fa", universe_policy="sorted")
