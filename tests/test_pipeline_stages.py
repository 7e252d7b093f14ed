from colstruct import FilterStage, FlatMapStage, MapStage, OptionalStage
from colstruct.domain.implementations.pipeline_stages import ChainedStage


def double(x):
    return 2 * x


def is_even(x):
    return x % 2 == 0


def halve_if_even(x):
    return x // 2 if x % 2 == 0 else None


def repeat(x):
    return [x] * x


class TestStages:
    def test_map(self):
        assert MapStage(double)(3) == [6]
        assert MapStage(double).name == "double"

    def test_filter(self):
        stage = FilterStage(is_even, name="even")
        assert stage(4) == [4]
        assert stage(3) == []
        assert stage.name == "even"

    def test_optional(self):
        stage = OptionalStage(halve_if_even)
        assert stage(8) == [4]
        assert stage(7) == []

    def test_flat_map(self):
        assert FlatMapStage(repeat)(3) == [3, 3, 3]
        assert FlatMapStage(repeat)(0) == []


class TestChainedStage:
    def test_then(self):
        chained = MapStage(double).then(FlatMapStage(repeat)).then(FilterStage(is_even))
        assert isinstance(chained, ChainedStage)
        assert len(chained.stages) == 3
        assert chained(1) == [2, 2]
        assert chained.name == "double -> repeat -> is_even"

    def test_stops_on_empty(self):
        calls = []

        def record(x):
            calls.append(x)
            return x

        chained = ChainedStage([FilterStage(is_even), MapStage(record)])
        assert chained(3) == []
        assert calls == []

    def test_nested_chains_flatten(self):
        inner = ChainedStage([MapStage(double), MapStage(double)])
        outer = ChainedStage([inner, OptionalStage(halve_if_even)])
        assert len(outer.stages) == 3
        assert outer(5) == [10]
