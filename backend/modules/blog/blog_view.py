"""
博客页面视图模型
从客户端状态推导出表单与表格需要展示的内容
"""

from typing import List, Optional
from pydantic import BaseModel

from .blog_state import ClientState, Phase

EMPTY_MESSAGE = "No blogs found."
LOADING_MESSAGE = "Loading..."


class BlogRow(BaseModel):
    number: int  # 表格序号，从 1 开始
    id: int
    title: str
    content: str


class BlogView(BaseModel):
    heading: str
    submit_label: str
    form_title: str
    form_content: str
    loading: bool
    rows: List[BlogRow] = []
    placeholder: Optional[str] = None


def build_view(state: ClientState) -> BlogView:
    editing = state.form.is_editing
    loading = state.phase == Phase.LOADING

    rows = [] if loading else [
        BlogRow(number=i + 1, id=b.id, title=b.title, content=b.content)
        for i, b in enumerate(state.blogs)
    ]

    placeholder = None
    if loading:
        placeholder = LOADING_MESSAGE
    elif not rows:
        placeholder = EMPTY_MESSAGE

    return BlogView(
        heading="Edit Blog" if editing else "Create Blog",
        submit_label="Update" if editing else "Save",
        form_title=state.form.title,
        form_content=state.form.content,
        loading=loading,
        rows=rows,
        placeholder=placeholder
    )
