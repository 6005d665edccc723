#!/usr/bin/env python3
"""
Ambari 主机组件状态查看工具

输入: 保存下来的 Ambari API 响应文件 (JSON 或 YAML)
输出: 各组件的状态表格
"""

import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ambari_client.config import load_settings, setup_logging
from ambari_client.model import DISPLAY_FIELDS, HostComponentStatuses
from ambari_client.utils.errors import AmbariClientError, AmbariErrorCode, PayloadError
from ambari_client.utils.parsers import parse_payload


console = Console()

logger = logging.getLogger(__name__)

BOOL_TAG = "tag:yaml.org,2002:bool"


class ResponseLoader(yaml.SafeLoader):
    """只把 true/false 识别为布尔值的 SafeLoader

    YAML 1.1 会把 ON/OFF/YES/NO 解析为布尔值, 而 maintenance_state
    的取值正是 ON/OFF, 需要保留为字符串。
    """


ResponseLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ResponseLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_payload(path: Path) -> Any:
    """读取响应文件

    JSON 是 YAML 的子集, 统一使用 ResponseLoader 解析。
    """
    if not path.is_file():
        raise AmbariClientError(
            "文件不存在",
            code=AmbariErrorCode.FILE_NOT_FOUND,
            details={"path": str(path)}
        )

    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.load(f, Loader=ResponseLoader)
        except yaml.YAMLError as e:
            raise PayloadError(
                "无法解析响应文件",
                details={"path": str(path), "error": str(e).splitlines()[0]}
            ) from e


def build_table(components: Dict[str, HostComponentStatuses], title: Optional[str] = None) -> Table:
    """按固定字段顺序构建状态表格"""
    table = Table(title=title)
    table.add_column("component", style="bold cyan")
    for name in DISPLAY_FIELDS:
        table.add_column(name)

    for key, status in components.items():
        cells: List[str] = [escape(key)]
        for value in status.to_dict().values():
            # None 与空字符串区分显示
            cells.append("[dim]-[/dim]" if value is None else escape(repr(value)))
        table.add_row(*cells)

    return table


def run(path: str, raw: bool = False, log_level: Optional[str] = None) -> int:
    """执行查看, 返回退出码"""
    try:
        settings = load_settings(log_level)
        setup_logging(settings.log_level)

        components = parse_payload(load_payload(Path(path)))
    except AmbariClientError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        return 1

    logger.info("共 %d 个组件", len(components))

    if not components:
        console.print("[yellow]⚠️  响应中没有主机组件[/yellow]")
        return 0

    if raw:
        for status in components.values():
            console.print(str(status), markup=False, highlight=False, soft_wrap=True)
        return 0

    title = "主机组件状态"
    if settings.cluster_name:
        title = f"{title} ({settings.cluster_name})"

    console.print(Panel(f"[bold cyan]{escape(path)}[/bold cyan]", expand=False))
    console.print(build_table(components, title=title))
    return 0


def main():
    """CLI 主入口"""
    import argparse

    parser = argparse.ArgumentParser(
        prog="ambari-status",
        description="查看 Ambari 主机组件状态",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  %(prog)s host_components.json
  %(prog)s datanode.yaml --raw
        """
    )

    parser.add_argument(
        "file",
        help="Ambari API 响应文件 (JSON 或 YAML)"
    )

    parser.add_argument(
        "--raw",
        action="store_true",
        help="输出调试字符串而非表格"
    )

    parser.add_argument(
        "--log-level",
        help="日志级别 (覆盖 AMBARI_LOG_LEVEL)"
    )

    args = parser.parse_args()

    try:
        sys.exit(run(args.file, raw=args.raw, log_level=args.log_level))
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  用户中断[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
