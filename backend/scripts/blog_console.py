#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
博客管理终端
在命令行中使用博客客户端（列表、新建、编辑、删除）

Usage:
    python scripts/blog_console.py [--base-url http://localhost:8000]

命令：
    list                 重新拉取列表
    title <文本>         设置表单标题
    content <文本>       设置表单内容
    save                 提交表单（新建或更新）
    edit <序号>          编辑表格中的某一行
    delete <序号>        删除表格中的某一行
    new                  清空表单，切换为新建
    quit                 退出
"""

import sys
import asyncio
import logging
import argparse
from pathlib import Path

# 确保可以导入项目模块
SCRIPT_DIR = Path(__file__).parent.resolve()
BACKEND_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(BACKEND_DIR))

from modules.blog.blog_api import BlogApi
from modules.blog.blog_client import BlogClient, ClientHooks
from modules.blog.blog_view import build_view

logger = logging.getLogger("blog_console")


class ConsoleHooks(ClientHooks):
    """终端交互：提示直接打印，确认需要输入 y"""

    def alert(self, message: str) -> None:
        print(f"! {message}")

    async def confirm(self, message: str) -> bool:
        answer = await asyncio.to_thread(input, f"{message} [y/N] ")
        return answer.strip().lower() in ("y", "yes")


def render(client: BlogClient) -> None:
    view = build_view(client.state)
    print()
    print(f"== {view.heading} ==")
    print(f"  Title:   {view.form_title}")
    print(f"  Content: {view.form_content}")
    print(f"  [{view.submit_label}]")
    print()
    print("== All Blogs ==")
    if view.placeholder:
        print(f"  {view.placeholder}")
    for row in view.rows:
        print(f"  {row.number:>3}  {row.title:<30}  {row.content}")
    print()


def _row_id(client: BlogClient, arg: str):
    """把表格序号换算成文章ID"""
    try:
        number = int(arg)
    except ValueError:
        print(f"! 无效的序号: {arg}")
        return None
    rows = build_view(client.state).rows
    if not 1 <= number <= len(rows):
        print(f"! 序号超出范围: {number}")
        return None
    return rows[number - 1].id


async def run(base_url: str) -> None:
    async with BlogApi(base_url) as api:
        client = BlogClient(api, ConsoleHooks())
        await client.mount()
        render(client)

        while True:
            try:
                line = (await asyncio.to_thread(input, "> ")).strip()
            except EOFError:
                break
            if not line:
                continue

            cmd, _, arg = line.partition(" ")
            if cmd == "quit":
                break
            elif cmd == "list":
                await client.mount()
            elif cmd in ("title", "content"):
                await client.set_field(cmd, arg)
            elif cmd == "save":
                await client.submit()
            elif cmd in ("edit", "delete"):
                blog_id = _row_id(client, arg)
                if blog_id is None:
                    continue
                if cmd == "edit":
                    await client.edit(blog_id)
                else:
                    await client.delete(blog_id)
            elif cmd == "new":
                await client.new_blog()
            else:
                print(__doc__)
                continue
            render(client)


def main():
    parser = argparse.ArgumentParser(description="博客管理终端")
    parser.add_argument("--base-url", default=None, help="后端地址，默认读取 CLIENT_BASE_URL")
    parser.add_argument("--verbose", action="store_true", help="输出调试日志")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
    asyncio.run(run(args.base_url))


if __name__ == "__main__":
    main()
