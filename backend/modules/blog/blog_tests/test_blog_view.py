# -*- coding: utf-8 -*-
"""
博客视图模型测试
"""

from modules.blog.blog_state import ClientState, FormState, BlogItem, Phase
from modules.blog.blog_view import build_view, EMPTY_MESSAGE, LOADING_MESSAGE


class TestBlogView:

    def test_create_mode_empty_table(self):
        view = build_view(ClientState(phase=Phase.READY))
        assert view.heading == "Create Blog"
        assert view.submit_label == "Save"
        assert view.rows == []
        assert view.placeholder == EMPTY_MESSAGE

    def test_loading(self):
        state = ClientState(phase=Phase.LOADING, blogs=(BlogItem(id=1, title="A", content="B"),))
        view = build_view(state)
        assert view.loading is True
        assert view.rows == []
        assert view.placeholder == LOADING_MESSAGE

    def test_rows_numbered_from_one(self):
        blogs = (BlogItem(id=7, title="A", content="B"), BlogItem(id=9, title="C", content="D"))
        view = build_view(ClientState(phase=Phase.READY, blogs=blogs))
        assert [(r.number, r.id, r.title) for r in view.rows] == [(1, 7, "A"), (2, 9, "C")]
        assert view.placeholder is None

    def test_edit_mode(self):
        state = ClientState(phase=Phase.READY, form=FormState(title="A", content="B", edit_id=7))
        view = build_view(state)
        assert view.heading == "Edit Blog"
        assert view.submit_label == "Update"
        assert view.form_title == "A"
        assert view.form_content == "B"
