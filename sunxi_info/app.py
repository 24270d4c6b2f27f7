# app.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .core.attributes import ATTRIBUTES, SysInfo
from .core.config import Settings
from .core.errors import HardwareReadFailure, ProfileNotFound, SysInfoError
from .core.hardware import SysfsIdentitySource, read_compatibles
from .core.server_api import report_identity

logger = logging.getLogger(__name__)


def activate(settings: Settings) -> SysInfo:
    source = SysfsIdentitySource(settings)
    if settings.compatible:
        return SysInfo.activate(source, key=settings.compatible)
    errors = []
    compatibles = read_compatibles(settings.dt_root, errors)
    try:
        return SysInfo.activate(source, compatibles)
    except ProfileNotFound:
        # a node we could not read may have been the sys-info node
        if errors:
            node, e = errors[0]
            raise HardwareReadFailure(f"cannot read device tree node {node}: {e}") from e
        raise


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sunxi-info", description="Show Allwinner board identity.")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--attr", choices=ATTRIBUTES, help="print one attribute and exit")
    g.add_argument("--report", action="store_true", help="send the fingerprint to the provisioning server")
    p.add_argument("--server", help="provisioning server base URL (overrides SUNXI_INFO_SERVER)")
    return p.parse_args(argv)


def _show_dialog(info: SysInfo) -> int:
    from PySide6 import QtWidgets
    from .ui.info_dialog import InfoDialog

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    dlg = InfoDialog(info)
    dlg.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"sunxi-info: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        info = activate(settings)
    except ProfileNotFound as e:
        logger.error("failed to determine the platform profile: %s", e)
        return 1
    except SysInfoError as e:
        logger.error("activation failed: %s", e)
        return 1

    if args.attr:
        try:
            sys.stdout.write(info.read_attribute(args.attr))
        except SysInfoError as e:
            logger.error("reading %s failed: %s", args.attr, e)
            return 1
        return 0

    if args.report:
        server = args.server or settings.server_base_url
        if not server:
            logger.error("no provisioning server configured (set SUNXI_INFO_SERVER or --server)")
            return 2
        try:
            ok, msg = report_identity(server, info)
        except SysInfoError as e:
            logger.error("cannot report identity: %s", e)
            return 1
        print(msg)
        return 0 if ok else 1

    return _show_dialog(info)


if __name__ == "__main__":
    sys.exit(main())
