"""Saving the document."""

from __future__ import annotations

from zoomedit.files import save_text
from zoomedit.keymaps import ResolutionMatch
from zoomedit.modes.base_mode import ModeContext, ModeResult
from zoomedit.runtime import telemetry


def save(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return save_to(context, context.filepath)


def save_to(context: ModeContext, path: str) -> ModeResult:
    """Write the document to ``path`` and make it the current file on success."""

    if not path:
        context.log = "no file name given"
        return ModeResult(consumed=True, status="noop")

    try:
        save_text(path, context.buffer.to_string())
    except OSError as exc:
        context.log = f"could not save {path}: {exc}"
        telemetry.record_event(
            "file.save_failed", level="error", data={"path": path, "error": str(exc)}
        )
        return ModeResult(consumed=True, status="error")

    context.filepath = path
    context.log = f"saved to {path}"
    telemetry.record_event("file.save", data={"path": path})
    return ModeResult(consumed=True, status="saved")


__all__ = ["save", "save_to"]
