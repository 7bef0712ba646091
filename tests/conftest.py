import pytest


@pytest.fixture
def make_corpus(tmp_path):
    """Write {relative_path: text} into a fresh directory and return it."""

    def _make(files, name="corpus"):
        root = tmp_path / name
        root.mkdir()
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(text, bytes):
                path.write_bytes(text)
            else:
                path.write_text(text, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def cat_dog_corpus(make_corpus):
    return make_corpus(
        {
            "a_cat.txt": "the cat sat",
            "b_dog.txt": "the dog sat on the mat",
        }
    )
