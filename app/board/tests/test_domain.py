import pytest
from board.domain.post import Page, PageRequest, Post, SortOrder


class TestPost:
    def test_create_has_no_id(self):
        post = Post.create(title="t", content="c")

        assert post.post_id is None
        assert not post.is_persisted

    def test_none_fields_are_rejected(self):
        with pytest.raises(ValueError):
            Post.create(title=None, content="c")

        post = Post(post_id=1, title="t", content="c")
        with pytest.raises(ValueError):
            post.update("t", None)
        assert post.content == "c"

    def test_update_replaces_both_fields(self):
        post = Post(post_id=3, title="t", content="c")

        post.update("", "new")

        assert (post.post_id, post.title, post.content) == (3, "", "new")


class TestSortOrder:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("title", SortOrder(field="title")),
            ("title,asc", SortOrder(field="title")),
            ("post_id,desc", SortOrder(field="post_id", descending=True)),
            (" content , DESC ", SortOrder(field="content", descending=True)),
        ],
    )
    def test_parse(self, raw, expected):
        assert SortOrder.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["password", "title,sideways", ""])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(ValueError):
            SortOrder.parse(raw)


class TestPageRequest:
    def test_defaults_sort_by_post_id(self):
        request = PageRequest()

        assert request.effective_sort == (SortOrder(field="post_id"),)
        assert request.offset == 0

    def test_offset(self):
        assert PageRequest(page_index=3, page_size=10).offset == 30

    @pytest.mark.parametrize("index, size", [(-1, 10), (0, 0)])
    def test_invalid_values(self, index, size):
        with pytest.raises(ValueError):
            PageRequest(page_index=index, page_size=size)


class TestPage:
    def test_total_pages_is_computed(self):
        page = Page(items=[1, 2], total_elements=5, page_index=0, page_size=2)

        assert page.total_pages == 3
        assert page.is_first
        assert not page.is_last

    def test_empty_page(self):
        page = Page(items=[], total_elements=0, page_index=0, page_size=20)

        assert page.total_pages == 0
        assert page.is_last

    def test_map_keeps_metadata(self):
        page = Page(items=[1, 2], total_elements=7, page_index=1, page_size=2)

        mapped = page.map(lambda n: n * 10)

        assert mapped.items == [10, 20]
        assert (
            mapped.total_elements,
            mapped.total_pages,
            mapped.page_index,
            mapped.page_size,
        ) == (7, 4, 1, 2)

    def test_explicit_total_pages_is_kept(self):
        page = Page(items=[], total_elements=5, page_index=0, page_size=2, total_pages=9)

        assert page.total_pages == 9

    @pytest.mark.parametrize(
        "index, size, total",
        [(0, 0, 0), (-1, 10, 0), (0, 10, -1)],
    )
    def test_invalid_values(self, index, size, total):
        with pytest.raises(ValueError):
            Page(items=[], total_elements=total, page_index=index, page_size=size)
