#!/usr/bin/env python3
"""
xaml-forms CLI — 設計文件 → Xamarin.Forms XAML

  python -m xaml_forms.cli colors design.json             # 顏色資源片段
  python -m xaml_forms.cli text-styles design.json        # 文字樣式資源片段
  python -m xaml_forms.cli layer design.json "Header"     # 單一圖層 → XAML
  python -m xaml_forms.cli export design.json -o ./out    # 寫出 Colors.xaml / Labels.xaml
  python -m xaml_forms.cli pull --file-key KEY -o design.json  # Figma → 設計文件
  python -m xaml_forms.cli watch design.json -o ./out     # 文件變更時自動 export
"""

import argparse
import os
import sys
import time
from pathlib import Path

import requests
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from . import __version__
from .catalog import (
    export_styleguide_colors,
    export_styleguide_text_styles,
    styleguide_colors,
    styleguide_text_styles,
)
from .config import DEFAULT_CONFIG_PATH, load_config, options_from_config
from .context import Context
from .document import DocumentError, find_layer, load_document, save_document
from .figma_reader import FigmaAPIClient, FigmaToDocument
from .layers import layer, layer_record
from .output import debug


def _load(path: str, config: dict):
    """讀取設計文件並建立 Context；失敗時印出錯誤並回傳 (None, None)."""
    try:
        document = load_document(path)
    except FileNotFoundError:
        print(f"❌ 找不到設計文件 '{path}'。")
        return None, None
    except DocumentError as e:
        print(f"❌ 設計文件格式錯誤：{e}")
        return None, None
    context = Context(options=options_from_config(config), project=document.project())
    return document, context


def _output_dir(args, config: dict) -> str:
    return args.output or config.get("export", {}).get("outputDir") or "."


def perform_export(document_path: str, output_dir: str, config: dict) -> int:
    """寫出 Colors.xaml 與 Labels.xaml，供 export 與 watch 共用."""
    document, context = _load(document_path, config)
    if document is None:
        return 1

    os.makedirs(output_dir, exist_ok=True)
    results = [
        export_styleguide_colors(context, document.colors),
        export_styleguide_text_styles(context, document.text_styles),
    ]
    for result in results:
        path = os.path.join(output_dir, result["filename"])
        with open(path, "w", encoding="utf-8") as f:
            f.write(result["code"] + "\n")
        print(f"   ✅ Wrote {path}")
    return 0


def cmd_colors(args, config: dict) -> int:
    document, context = _load(args.document, config)
    if document is None:
        return 1
    print(styleguide_colors(context, document.colors)["code"])
    return 0


def cmd_text_styles(args, config: dict) -> int:
    document, context = _load(args.document, config)
    if document is None:
        return 1
    print(styleguide_text_styles(context, document.text_styles)["code"])
    return 0


def cmd_layer(args, config: dict) -> int:
    document, context = _load(args.document, config)
    if document is None:
        return 1
    selected = find_layer(document, args.name)
    if selected is None:
        print(f"❌ 找不到圖層 '{args.name}'。")
        return 1
    if args.json:
        print(debug(layer_record(context, selected))["code"])
    else:
        print(layer(context, selected)["code"])
    return 0


def cmd_export(args, config: dict) -> int:
    print(f"📦 Exporting styleguide from: {args.document}")
    return perform_export(args.document, _output_dir(args, config), config)


def cmd_pull(args, config: dict) -> int:
    """Pull: 從 Figma 讀取檔案並存成設計文件 JSON."""
    figma_cfg = config.get("figma", {})
    token = figma_cfg.get("personalAccessToken") or os.environ.get("FIGMA_TOKEN")
    file_key = args.file_key or figma_cfg.get("fileKey")

    if not token:
        print("❌ 請設定 FIGMA_TOKEN 環境變數，或在 xaml-forms.config.json 的 figma.personalAccessToken 設定。")
        return 1
    if not file_key:
        print("❌ 請使用 --file-key 或在 config 的 figma.fileKey 設定 Figma 檔案 key。")
        return 1

    print(f"📥 Pulling from Figma: {file_key}")
    client = FigmaAPIClient(token)
    try:
        figma_data = client.get_file(file_key)
    except requests.HTTPError as e:
        status = getattr(e.response, "status_code", None)
        if status == 403:
            print("❌ Figma API 403：Token 無效或已過期，請重新產生 FIGMA_TOKEN。")
        elif status == 404:
            print(f"❌ Figma API 404：找不到檔案 '{file_key}'，請確認 file key 是否正確。")
        else:
            print(f"❌ Figma API 錯誤：{e}")
        return 1
    except requests.RequestException as e:
        print(f"❌ 無法連線到 Figma API：{e}")
        return 1

    document = FigmaToDocument().convert(figma_data, page_index=args.page_index)
    path = save_document(document, args.output)
    print(
        f"   ✅ {len(document.colors)} colors, {len(document.text_styles)} text styles, "
        f"{len(document.layers)} layers → {path}"
    )
    return 0


class ChangeHandler(FileSystemEventHandler):
    """設計文件變更事件處理器，帶 debounce 防抖。"""

    def __init__(self, callback, watched_path: str, debounce: float = 1.0):
        self.callback = callback
        self.watched_path = str(Path(watched_path).resolve())
        self.last_trigger = 0.0
        self.debounce_seconds = debounce

    def _handle(self, path: str) -> None:
        if str(Path(path).resolve()) != self.watched_path:
            return
        current_time = time.time()
        if current_time - self.last_trigger < self.debounce_seconds:
            return
        self.last_trigger = current_time
        print(f"\n🔄 File changed: {path}")
        self.callback()

    def on_modified(self, event):
        if event.is_directory:
            return
        self._handle(event.src_path)

    def on_moved(self, event):
        # 編輯器常以「寫暫存檔再 rename」的方式存檔
        if event.is_directory:
            return
        self._handle(event.dest_path)


def cmd_watch(args, config: dict) -> int:
    """Watch: 監聽設計文件變更並自動 export."""
    document_path = args.document
    output_dir = _output_dir(args, config)
    print(f"👀 Watching '{document_path}' for changes...")
    print(f"   Output: {output_dir}")
    print("   Press Ctrl+C to stop.")

    def export_task():
        perform_export(document_path, output_dir, config)

    export_task()

    event_handler = ChangeHandler(export_task, document_path)
    observer = Observer()
    watch_dir = str(Path(document_path).resolve().parent)
    observer.schedule(event_handler, path=watch_dir, recursive=False)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\n👋 Stopping watch...")
        observer.stop()
    finally:
        observer.join()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xaml-forms",
        description="xaml-forms: design document → Xamarin.Forms XAML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config path")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    colors_p = sub.add_parser("colors", help="Print the color resources snippet")
    colors_p.add_argument("document", help="Design document JSON")

    styles_p = sub.add_parser("text-styles", help="Print the text style resources snippet")
    styles_p.add_argument("document", help="Design document JSON")

    layer_p = sub.add_parser("layer", help="Convert one layer to XAML",
        epilog="Examples:\n  xaml-forms layer design.json 'Header_Icon'\n  xaml-forms layer design.json 'Title' --json",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    layer_p.add_argument("document", help="Design document JSON")
    layer_p.add_argument("name", help="Layer name (first match, depth-first)")
    layer_p.add_argument("--json", action="store_true", help="Dump the attribute record as JSON")

    export_p = sub.add_parser("export", help="Write Colors.xaml and Labels.xaml")
    export_p.add_argument("document", help="Design document JSON")
    export_p.add_argument("--output", "-o", help="Output directory")

    pull_p = sub.add_parser("pull", help="Figma → design document JSON",
        epilog="Examples:\n  xaml-forms pull --file-key ABC123 -o design.json",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    pull_p.add_argument("--file-key", help="Figma file key")
    pull_p.add_argument("--page-index", type=int, default=0, help="Page whose layers are converted")
    pull_p.add_argument("--output", "-o", default="design.json", help="Document path to write")

    watch_p = sub.add_parser("watch", help="Re-export whenever the document changes")
    watch_p.add_argument("document", help="Design document JSON")
    watch_p.add_argument("--output", "-o", help="Output directory")

    return parser


_COMMANDS = {
    "colors": cmd_colors,
    "text-styles": cmd_text_styles,
    "layer": cmd_layer,
    "export": cmd_export,
    "pull": cmd_pull,
    "watch": cmd_watch,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)

    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
