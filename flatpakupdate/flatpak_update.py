#!/usr/bin/python3
"""
Update Flatpak applications and report the result to Telegram.
"""
import signal
import sys

from .args import parse_args
from .config import Settings, ConfigError
from .log_config import init_logs
from .notification import (
    TelegramNotifier, format_report_message, format_error_message)
from .update_manager import UpdateManager
from .utils import check_dependencies, MissingDependencyError
from .common.exit_codes import EXIT
from .common.package_manager import ScanError
from .common.workspace import Workspace
from .flatpak.flatpak_cli import FlatpakCLI

REQUIRED_TOOLS = ("flatpak",)


def main(args=None, environ=None):
    args = parse_args(args)

    try:
        settings = Settings.from_env(environ)
    except ConfigError as err:
        print(str(err), file=sys.stderr)
        return EXIT.ERR_CONFIG

    log, _log_level = init_logs(
        level=args.log or settings.log_level, log_path=args.log_file)
    log.debug("Run updater with args: %s", str(args))
    log.info("Starting Flatpak updater on host: %s", settings.hostname)
    log.info("Telegram API host: %s", settings.api_host)

    log.info("Checking dependencies...")
    try:
        check_dependencies(REQUIRED_TOOLS, log)
    except MissingDependencyError:
        return EXIT.ERR_DEPENDENCY

    notifier = TelegramNotifier(
        settings.api_endpoint, settings.bot_token, settings.chat_id, log)
    workspace = Workspace(log)
    original_sigterm_handler = signal.getsignal(signal.SIGTERM)
    signal.signal(signal.SIGTERM, _terminate)
    try:
        return run_updates(args, settings, notifier, workspace, log)
    except KeyboardInterrupt:
        log.error("Interrupted")
        return EXIT.SIGINT
    finally:
        workspace.cleanup()
        signal.signal(signal.SIGTERM, original_sigterm_handler)


def run_updates(args, settings, notifier, workspace, log):
    pkg_mng = FlatpakCLI(
        log, workspace, direct=args.direct, show_rate=args.show_rate)

    log.info("Starting update check...")
    try:
        packages = pkg_mng.get_updates()
    except ScanError as err:
        log.error("Failed to check for updates: %s", err)
        notifier.send(format_error_message(
            settings.hostname, "Failed to check for updates"))
        return EXIT.ERR_SCAN

    report = UpdateManager(packages, pkg_mng, log).run()

    if not notifier.send(format_report_message(report, settings.hostname)):
        log.error("Failed to send Telegram notification")
        return EXIT.ERR_NOTIFY
    log.info("Update report sent to Telegram successfully")

    if report.failed:
        return EXIT.ERR_UPDATE
    return EXIT.OK


def _terminate(_sig, _frame):
    # unwinds the stack so temporary files are removed in `main`
    raise SystemExit(EXIT.SIGTERM)


if __name__ == '__main__':
    sys.exit(main())
