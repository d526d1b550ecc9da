"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["owner", "upload", "download", "delete", "list", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2FB67C bold",
        "command": "#0088ff bold",
    }
)

LEDGER_GREEN = "\033[38;2;47;182;124m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

LOGO = f"""{LEDGER_GREEN}
 ███████╗██╗██╗     ███████╗███████╗████████╗ ██████╗ ██████╗  █████╗  ██████╗ ███████╗
 ██╔════╝██║██║     ██╔════╝██╔════╝╚══██╔══╝██╔═══██╗██╔══██╗██╔══██╗██╔════╝ ██╔════╝
 █████╗  ██║██║     █████╗  ███████╗   ██║   ██║   ██║██████╔╝███████║██║  ███╗█████╗
 ██╔══╝  ██║██║     ██╔══╝  ╚════██║   ██║   ██║   ██║██╔══██╗██╔══██║██║   ██║██╔══╝
 ██║     ██║███████╗███████╗███████║   ██║   ╚██████╔╝██║  ██║██║  ██║╚██████╔╝███████╗
 ╚═╝     ╚═╝╚══════╝╚══════╝╚══════╝   ╚═╝    ╚═════╝ ╚═╝  ╚═╝╚═╝  ╚═╝ ╚═════╝ ╚══════╝
{RESET}"""

WELCOME_TITLE = "Filestorage CLI - Chunked files on a ledger-backed store"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "filestorage> "

DOWNLOADS_DIR = "downloads"

HELP_TEXT = """Available commands:
  owner [address]                       Show or set the owner address used for uploads
  upload <local_path> [file_name]       Upload a local file in chunks
  download <storage_path> [output_dir]  Download a file (defaults to downloads/)
  delete <file_name>                    Delete one of your files
  list                                  List your files with upload progress
  clear                                 Clear screen and redisplay welcome message
  help                                  Show this help
  exit                                  Exit REPL

Storage paths have the form <owner>/<file_name>, as shown by 'list'.
Examples:
  owner 0x77333Da3492C4BBB9CCF3EA5BB63D6202F86CDA8
  upload photos/cat.png
  upload report.pdf q3-report.pdf
  list
  download 77333Da3492C4BBB9CCF3EA5BB63D6202F86CDA8/cat.png
  delete cat.png"""
