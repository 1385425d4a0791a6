"""
博客客户端
驱动 blog_state 状态机：分发界面事件，执行命令（网络请求、提示、确认），
并把请求结果作为新的事件送回状态机。

网络失败只记录日志，界面不显示错误，列表保持不变。
"""

import inspect
import logging
from collections import deque
from typing import Optional

from .blog_api import BlogApi, ClientError
from .blog_state import (
    ClientState, Event, Command, update,
    Mounted, FieldChanged, Submitted, EditClicked, DeleteClicked, NewBlogClicked,
    BlogsLoaded, BlogsLoadFailed, SaveFinished, DeleteFinished,
    FetchBlogs, CreateBlog, UpdateBlog, DeleteBlog, Alert, Confirm, ScrollToTop,
)

logger = logging.getLogger(__name__)


class ClientHooks:
    """
    交互钩子
    默认实现不与用户交互：提示写日志，确认一律拒绝
    confirm 可以是协程，结果会在事件循环中等待
    """

    def alert(self, message: str) -> None:
        logger.warning(f"[提示] {message}")

    def confirm(self, message: str) -> bool:
        logger.info(f"[确认] {message} -> 否（无交互界面）")
        return False

    def scroll_to_top(self) -> None:
        pass


class BlogClient:
    """博客客户端（单个事件循环内顺序执行）"""

    def __init__(self, api: BlogApi, hooks: Optional[ClientHooks] = None, state: Optional[ClientState] = None):
        self.api = api
        self.hooks = hooks or ClientHooks()
        self.state = state or ClientState()

    async def dispatch(self, event: Event) -> ClientState:
        """分发事件，直到由它引发的所有命令执行完毕"""
        queue = deque([event])
        while queue:
            current = queue.popleft()
            self.state, commands = update(self.state, current)
            for command in commands:
                follow_up = await self._execute(command)
                if follow_up is not None:
                    queue.append(follow_up)
        return self.state

    async def _execute(self, command: Command) -> Optional[Event]:
        if isinstance(command, FetchBlogs):
            try:
                blogs = await self.api.list_all()
            except ClientError as e:
                logger.error(f"Error fetching blogs: {e}")
                return BlogsLoadFailed(command.token, str(e))
            return BlogsLoaded(command.token, tuple(blogs))

        if isinstance(command, (CreateBlog, UpdateBlog)):
            try:
                if isinstance(command, CreateBlog):
                    await self.api.create(command.title, command.content)
                else:
                    await self.api.update(command.blog_id, command.title, command.content)
            except ClientError as e:
                logger.error(f"Error saving blog: {e}")
                return SaveFinished(str(e))
            return SaveFinished()

        if isinstance(command, DeleteBlog):
            try:
                await self.api.delete(command.blog_id)
            except ClientError as e:
                logger.error(f"Error deleting blog: {e}")
                return DeleteFinished(str(e))
            return DeleteFinished()

        if isinstance(command, Alert):
            self.hooks.alert(command.message)
            return None

        if isinstance(command, Confirm):
            answer = self.hooks.confirm(command.message)
            if inspect.isawaitable(answer):
                answer = await answer
            return command.on_confirm if answer else None

        if isinstance(command, ScrollToTop):
            self.hooks.scroll_to_top()
            return None

        raise TypeError(f"unknown command: {command!r}")

    # ==================== 界面操作 ====================

    async def mount(self) -> ClientState:
        return await self.dispatch(Mounted())

    async def set_field(self, field: str, value: str) -> ClientState:
        return await self.dispatch(FieldChanged(field, value))

    async def submit(self) -> ClientState:
        return await self.dispatch(Submitted())

    async def edit(self, blog_id: int) -> ClientState:
        return await self.dispatch(EditClicked(blog_id))

    async def delete(self, blog_id: int) -> ClientState:
        return await self.dispatch(DeleteClicked(blog_id))

    async def new_blog(self) -> ClientState:
        return await self.dispatch(NewBlogClicked())
