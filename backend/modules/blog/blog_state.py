"""
博客客户端状态机

状态为不可变、可序列化的 ClientState；每个界面事件经由唯一的
update(state, event) 计算出新状态和待执行的命令，副作用由 blog_client 执行。

阶段: idle -> loading -> ready，提交/删除时为 submitting
表单: 新建（edit_id 为 None）或 编辑（edit_id 为文章ID）
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

FILL_ALL_FIELDS = "Please fill in all fields"
CONFIRM_DELETE = "Are you sure you want to delete this blog?"


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    SUBMITTING = "submitting"


class BlogItem(BaseModel):
    """客户端缓存的文章"""
    id: int
    title: str
    content: str

    model_config = ConfigDict(frozen=True, extra="ignore")


class FormState(BaseModel):
    title: str = ""
    content: str = ""
    edit_id: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_editing(self) -> bool:
        return self.edit_id is not None


class ClientState(BaseModel):
    phase: Phase = Phase.IDLE
    blogs: Tuple[BlogItem, ...] = ()
    form: FormState = FormState()
    # 最近一次列表请求的序号，旧请求的响应会被丢弃
    list_token: int = 0

    model_config = ConfigDict(frozen=True)


# ==================== 事件 ====================

@dataclass(frozen=True)
class Mounted:
    pass


@dataclass(frozen=True)
class FieldChanged:
    field: str
    value: str


@dataclass(frozen=True)
class Submitted:
    pass


@dataclass(frozen=True)
class EditClicked:
    blog_id: int


@dataclass(frozen=True)
class DeleteClicked:
    blog_id: int


@dataclass(frozen=True)
class DeleteConfirmed:
    blog_id: int


@dataclass(frozen=True)
class NewBlogClicked:
    pass


@dataclass(frozen=True)
class BlogsLoaded:
    token: int
    blogs: Tuple[BlogItem, ...]


@dataclass(frozen=True)
class BlogsLoadFailed:
    token: int
    error: str


@dataclass(frozen=True)
class SaveFinished:
    error: Optional[str] = None


@dataclass(frozen=True)
class DeleteFinished:
    error: Optional[str] = None


Event = Union[
    Mounted, FieldChanged, Submitted, EditClicked, DeleteClicked, DeleteConfirmed,
    NewBlogClicked, BlogsLoaded, BlogsLoadFailed, SaveFinished, DeleteFinished
]


# ==================== 命令 ====================

@dataclass(frozen=True)
class FetchBlogs:
    token: int


@dataclass(frozen=True)
class CreateBlog:
    title: str
    content: str


@dataclass(frozen=True)
class UpdateBlog:
    blog_id: int
    title: str
    content: str


@dataclass(frozen=True)
class DeleteBlog:
    blog_id: int


@dataclass(frozen=True)
class Alert:
    message: str


@dataclass(frozen=True)
class Confirm:
    message: str
    on_confirm: Event


@dataclass(frozen=True)
class ScrollToTop:
    pass


Command = Union[FetchBlogs, CreateBlog, UpdateBlog, DeleteBlog, Alert, Confirm, ScrollToTop]


# ==================== 状态转移 ====================

def _resync(state: ClientState) -> Tuple[ClientState, List[Command]]:
    """丢弃缓存，重新拉取完整列表"""
    token = state.list_token + 1
    return state.model_copy(update={"phase": Phase.LOADING, "list_token": token}), [FetchBlogs(token)]


def update(state: ClientState, event: Event) -> Tuple[ClientState, List[Command]]:
    """根据事件计算新状态与命令，不产生任何副作用"""
    if isinstance(event, Mounted):
        return _resync(state)

    if isinstance(event, FieldChanged):
        if event.field not in ("title", "content"):
            raise ValueError(f"unknown form field: {event.field}")
        form = state.form.model_copy(update={event.field: event.value})
        return state.model_copy(update={"form": form}), []

    if isinstance(event, Submitted):
        form = state.form
        if not form.title or not form.content:
            return state, [Alert(FILL_ALL_FIELDS)]
        if form.is_editing:
            command = UpdateBlog(form.edit_id, form.title, form.content)
        else:
            command = CreateBlog(form.title, form.content)
        return state.model_copy(update={"phase": Phase.SUBMITTING}), [command]

    if isinstance(event, SaveFinished):
        return _resync(state.model_copy(update={"form": FormState()}))

    if isinstance(event, EditClicked):
        blog = next((b for b in state.blogs if b.id == event.blog_id), None)
        if blog is None:
            logger.warning(f"编辑的文章不在本地缓存中: {event.blog_id}")
            return state, []
        form = FormState(title=blog.title, content=blog.content, edit_id=blog.id)
        return state.model_copy(update={"form": form}), [ScrollToTop()]

    if isinstance(event, DeleteClicked):
        return state, [Confirm(CONFIRM_DELETE, DeleteConfirmed(event.blog_id))]

    if isinstance(event, DeleteConfirmed):
        return state.model_copy(update={"phase": Phase.SUBMITTING}), [DeleteBlog(event.blog_id)]

    if isinstance(event, DeleteFinished):
        return _resync(state)

    if isinstance(event, NewBlogClicked):
        return state.model_copy(update={"form": FormState()}), []

    if isinstance(event, (BlogsLoaded, BlogsLoadFailed)):
        if event.token != state.list_token:
            logger.debug(f"丢弃过期的列表响应: {event.token} (当前 {state.list_token})")
            return state, []
        if isinstance(event, BlogsLoaded):
            return state.model_copy(update={"phase": Phase.READY, "blogs": tuple(event.blogs)}), []
        return state.model_copy(update={"phase": Phase.READY}), []

    raise TypeError(f"unknown event: {event!r}")
