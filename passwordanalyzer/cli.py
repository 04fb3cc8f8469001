from __future__ import annotations

import argparse
import json
import os
from typing import Any, List

from .core import analyze, format_report
from .api import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _dump(obj: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(obj, ensure_ascii=False, indent=2))
    else:
        print(obj)


def main(argv: List[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="passwordanalyzer", description="Password Analyzer: score a password against a fixed checklist.")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=os.getenv("LOG_LEVEL", "INFO"))
    sub = p.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="Analyze a password and print the report.")
    p_check.add_argument("password", nargs="?", default="", help="Password to evaluate (not stored).")
    p_check.add_argument("--json", action="store_true")
    p_check.add_argument("--show-password", action="store_true", help="Include the password in JSON output.")

    p_serve = sub.add_parser("serve", help="Run FastAPI server.")
    p_serve.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    p_serve.add_argument("--port", type=int, default=int(os.getenv("PORT", "5005")))
    p_serve.add_argument("--reload", action="store_true")

    args = p.parse_args(argv)
    configure_logging(args.log_level)

    if args.cmd == "check":
        result = analyze(args.password)
        if args.json:
            _dump(result.as_dict(include_password=args.show_password), True)
        else:
            _dump(format_report(result), False)
        return

    if args.cmd == "serve":
        import uvicorn
        uvicorn.run("passwordanalyzer.api:create_app", factory=True, host=args.host, port=args.port, reload=args.reload)
        return


if __name__ == "__main__":
    main()
