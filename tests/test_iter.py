from puzzletools.iter import unique_element


class TestUniqueElement:
    def test_empty(self):
        assert unique_element([]) is None

    def test_single(self):
        assert unique_element([1]) == 1

    def test_several(self):
        assert unique_element([1, 2]) is None

    def test_generator(self):
        assert unique_element(x for x in "A") == "A"
