import asyncio, argparse
from notebooklm_mcp.config import load_settings
from notebooklm_mcp.server import main
from notebooklm_mcp.session import AppContext


def cli():
  p = argparse.ArgumentParser(prog="notebooklm-mcp", description="NotebookLM MCP server (stdio)")
  p.add_argument('--env-file', type=str, default=None, help='Path to a .env file with GOOGLE_EMAIL / GOOGLE_PASSWORD')
  args = p.parse_args()
  asyncio.run(main(AppContext(load_settings(args.env_file))))


if __name__ == "__main__":
  cli()
