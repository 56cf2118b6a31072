"""
List, upload, or delete blog posts from the shell (no admin UI needed).
Run from the project folder:
    python manage_blogs.py list
    python manage_blogs.py create --title "..." --description "..." --media clip.mp4
    python manage_blogs.py delete <id> [--yes]
"""
import argparse
import asyncio
import contextlib
import mimetypes
import os
import sys

from app.adapters.httpx_blog_adapter import HttpxBlogAdapter
from app.adapters.notice_board_adapter import ConsoleNotifierAdapter
from app.dependencies import build_http_client
from app.domain.enums import NoticeLevel
from app.domain.errors import DraftValidationError
from app.domain.models import MediaFile
from app.services.blog_manager import EMPTY_LIST_MESSAGE, BlogManager


def load_media(path: str) -> MediaFile:
    content_type, _ = mimetypes.guess_type(path)
    with open(path, "rb") as f:
        data = f.read()
    return MediaFile(
        filename=os.path.basename(path),
        content_type=content_type or "application/octet-stream",
        data=data,
    )


def print_posts(manager: BlogManager) -> None:
    if not manager.posts:
        print(EMPTY_LIST_MESSAGE)
        return
    for post in manager.posts:
        print(f"[{post.id}] {post.title}  ({post.render_kind}: {post.media_url})")
        for line in post.description.splitlines() or [""]:
            print(f"    {line}")


async def _ask(prompt: str) -> bool:
    answer = await asyncio.to_thread(input, f"{prompt} [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


async def _always_yes(prompt: str) -> bool:
    return True


async def _report_progress(manager: BlogManager, interval: float = 0.2) -> None:
    last = -1
    while True:
        if manager.upload.loading and manager.upload.progress != last:
            last = manager.upload.progress
            print(f"  Uploading... {last}%")
        await asyncio.sleep(interval)


async def run(args: argparse.Namespace, manager: BlogManager) -> int:
    if args.command == "list":
        if not await manager.fetch_list():
            print("  FAIL - could not load blogs (see log)")
            return 1
        print_posts(manager)
        return 0

    if args.command == "create":
        manager.update_draft(title=args.title, description=args.description)
        try:
            task = manager.select_media(load_media(args.media))
        except (OSError, DraftValidationError) as e:
            print(f"  !! - {e}")
            return 1
        if task:
            await task

        reporter = asyncio.create_task(_report_progress(manager))
        try:
            notice = await manager.submit_draft()
        finally:
            reporter.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await reporter
        if notice.level is not NoticeLevel.SUCCESS:
            return 1
        print_posts(manager)
        return 0

    if args.command == "delete":
        confirm = _always_yes if args.yes else _ask
        await manager.fetch_list()
        notice = await manager.delete_post(args.id, confirm=confirm)
        if notice is None:
            print("  Cancelled.")
            return 0
        if notice.level is not NoticeLevel.SUCCESS:
            return 1
        print_posts(manager)
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage blog posts on the blog backend.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show every post")

    create = sub.add_parser("create", help="Upload a new post with an image or video")
    create.add_argument("--title", required=True)
    create.add_argument("--description", required=True)
    create.add_argument("--media", required=True, help="Path to an image or video file")

    delete = sub.add_parser("delete", help="Delete a post by id")
    delete.add_argument("id")
    delete.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    manager = BlogManager(
        api=HttpxBlogAdapter(client=build_http_client()),
        notifier=ConsoleNotifierAdapter(),
    )
    try:
        return await run(args, manager)
    finally:
        await manager.aclose()


if __name__ == "__main__":
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.exit(asyncio.run(main()))
