"""Scene parser — hand-rolled recursive descent.

Parses the scene format into the AST types from ir.ast:

    scene curve                  optional header with the default connector type
    A[0, 0, 100, 50] "Start"     shape: id[x, y, width, height] plus optional label
    A --> B                      connector
    A.right -->|orthogonal| B    pinned side, per-connector type
    A --> B --> C                chain

``%%`` starts a comment. Unknown connector types and sides are not errors:
they fall back to direct routing and to nearest-anchor selection.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from connectflow.ir.ast import ConnectorDecl, Scene, ShapeDecl
from connectflow.types import ConnectorType, Side

logger = logging.getLogger(__name__)

# ─── Tokenizer ───────────────────────────────────────────────────────────────

_COMMENT_RE = re.compile(r"%%[^\n]*")
_WHITESPACE_RE = re.compile(r"[ \t]+")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")

_SHAPE_ID_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_WORD_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
_SIDE_RE = re.compile(r"[A-Za-z]+")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_TYPE_LABEL_RE = re.compile(r"[^|\n\r]*")

_CONNECTOR_TOKEN = "-->"
_HEADER_KEYWORD = "scene"


@dataclass
class _ShapeRef:
    id: str
    side: Side | None = None
    decl: ShapeDecl | None = None


@dataclass
class _Cursor:
    """Stateful parser cursor over the input string."""

    src: str
    pos: int = 0

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def consume(self, s: str) -> bool:
        if self.peek(s):
            self.pos += len(s)
            return True
        return False

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        return None

    def skip_ws(self) -> None:
        """Skip spaces/tabs and trailing comments (not newlines)."""
        while True:
            m = _WHITESPACE_RE.match(self.src, self.pos)
            if m:
                self.pos = m.end()
                continue
            m = _COMMENT_RE.match(self.src, self.pos)
            if m:
                self.pos = m.end()
                continue
            break

    def consume_newline(self) -> bool:
        m = _NEWLINE_RE.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return True
        return False

    def line(self) -> int:
        return self.src.count("\n", 0, self.pos) + 1

    def error(self, message: str) -> ValueError:
        return ValueError(f"line {self.line()}: {message}")

    def expect_end_of_statement(self) -> None:
        self.skip_ws()
        if not self.eof() and not self.consume_newline():
            rest = self.src[self.pos :].splitlines()[0]
            raise self.error(f"unexpected input '{rest}'")

    # ── Header ────────────────────────────────────────────────────────────────

    def try_parse_header(self) -> ConnectorType | None:
        """Try to parse 'scene' or 'scene <type>'. Returns None if absent."""
        saved = self.pos
        self.skip_ws()
        word = self.match_re(_SHAPE_ID_RE)
        if word != _HEADER_KEYWORD or self.peek("[") or self.peek("."):
            self.pos = saved
            return None
        line = self.line()
        self.skip_ws()
        if self.peek(_CONNECTOR_TOKEN):
            # A shape named 'scene' starting a connector.
            self.pos = saved
            return None
        type_word = self.match_re(_WORD_RE)
        self.expect_end_of_statement()
        if type_word is None:
            return ConnectorType.default()
        return _connector_type(type_word, line)

    # ── Numbers and labels ────────────────────────────────────────────────────

    def parse_number(self) -> float:
        self.skip_ws()
        text = self.match_re(_NUMBER_RE)
        if text is None:
            raise self.error("expected a number")
        value = float(text)
        if not math.isfinite(value):
            raise self.error(f"number out of range: {text}")
        return value

    def parse_quoted_string(self) -> str:
        """Parse "..." with backslash escaping. Caller must have seen opening quote."""
        self.pos += 1  # consume "
        buf: list[str] = []
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch == '"':
                self.pos += 1
                return "".join(buf)
            if ch in "\r\n":
                break
            if ch == "\\" and self.pos + 1 < len(self.src):
                buf.append(self.src[self.pos + 1])
                self.pos += 2
            else:
                buf.append(ch)
                self.pos += 1
        raise self.error("unterminated string")

    # ── Shape box ─────────────────────────────────────────────────────────────

    def parse_box(self, shape_id: str) -> ShapeDecl:
        """Parse '[x, y, width, height]'. Caller must have seen the opening bracket."""
        self.pos += 1  # consume [
        values: list[float] = []
        for i in range(4):
            if i:
                self.skip_ws()
                if not self.consume(","):
                    raise self.error(f"expected ',' in box of '{shape_id}'")
            values.append(self.parse_number())
        self.skip_ws()
        if not self.consume("]"):
            raise self.error(f"expected ']' after box of '{shape_id}'")
        x, y, width, height = values
        if width < 0 or height < 0:
            raise self.error(f"shape '{shape_id}' has a negative size")
        return ShapeDecl(id=shape_id, x=x, y=y, width=width, height=height)

    # ── Shape ref ─────────────────────────────────────────────────────────────

    def parse_shape_ref(self) -> _ShapeRef | None:
        self.skip_ws()
        shape_id = self.match_re(_SHAPE_ID_RE)
        if not shape_id:
            return None
        ref = _ShapeRef(id=shape_id)
        if self.peek("["):
            ref.decl = self.parse_box(shape_id)
        if self.consume("."):
            word = self.match_re(_SIDE_RE)
            if word is None:
                raise self.error(f"expected a side after '{shape_id}.'")
            ref.side = _side(word, self.line())
        return ref

    # ── Connector ─────────────────────────────────────────────────────────────

    def try_parse_type_label(self) -> ConnectorType | None:
        if not self.consume("|"):
            return None
        text = (self.match_re(_TYPE_LABEL_RE) or "").strip()
        if not self.consume("|"):
            raise self.error("expected closing '|' after connector type")
        return _connector_type(text, self.line())

    def parse_connector_chain(self) -> list[tuple[ConnectorType | None, _ShapeRef]]:
        segments: list[tuple[ConnectorType | None, _ShapeRef]] = []
        while True:
            self.skip_ws()
            if not self.consume(_CONNECTOR_TOKEN):
                break
            connector_type = self.try_parse_type_label()
            target = self.parse_shape_ref()
            if target is None:
                raise self.error(f"expected a shape after '{_CONNECTOR_TOKEN}'")
            segments.append((connector_type, target))
        return segments

    # ── Statement ─────────────────────────────────────────────────────────────

    def parse_statement_into(self, scene: Scene) -> None:
        line = self.line()
        source = self.parse_shape_ref()
        if source is None:
            rest = self.src[self.pos :].splitlines()[0]
            raise self.error(f"unexpected input '{rest}'")

        segments = self.parse_connector_chain()
        if not segments:
            # Shape declaration, with an optional label.
            if source.decl is None:
                raise self.error(f"shape '{source.id}' needs a box: {source.id}[x, y, width, height]")
            if source.side is not None:
                raise self.error(f"unexpected side on shape declaration '{source.id}'")
            self.skip_ws()
            if self.peek('"'):
                source.decl.label = self.parse_quoted_string()
            upsert_shape(scene.shapes, source.decl)
            self.expect_end_of_statement()
            return

        refs = [source] + [target for _, target in segments]
        for ref in refs:
            if ref.decl is not None:
                upsert_shape(scene.shapes, ref.decl)
        prev = source
        for connector_type, target in segments:
            scene.connectors.append(
                ConnectorDecl(
                    from_id=prev.id,
                    to_id=target.id,
                    connector_type=connector_type,
                    start_side=prev.side,
                    end_side=target.side,
                    line=line,
                )
            )
            prev = target
        self.expect_end_of_statement()

    # ── Top-level parse ───────────────────────────────────────────────────────

    def parse_scene(self) -> Scene:
        scene = Scene()
        while True:
            self.skip_ws()
            if not self.consume_newline():
                break
        connector_type = self.try_parse_header()
        if connector_type is not None:
            scene.connector_type = connector_type

        while not self.eof():
            self.skip_ws()
            if self.eof():
                break
            if self.consume_newline():
                continue
            self.parse_statement_into(scene)
        return scene


# ─── Helpers ─────────────────────────────────────────────────────────────────


def upsert_shape(shapes: list[ShapeDecl], shape: ShapeDecl) -> None:
    """First-definition-wins: insert shape only if id not already present."""
    if not any(s.id == shape.id for s in shapes):
        shapes.append(shape)


def _connector_type(word: str, line: int) -> ConnectorType:
    if not ConnectorType.is_known(word):
        logger.warning("line %d: unknown connector type '%s'; using direct", line, word)
    return ConnectorType.parse(word)


def _side(word: str, line: int) -> Side | None:
    side = Side.parse(word)
    if side is None:
        logger.warning("line %d: unknown side '%s'; picking the nearest anchor instead", line, word)
    return side


# ─── Public API ──────────────────────────────────────────────────────────────


class SceneParser:
    """Parser for the scene format."""

    def parse(self, src: str) -> Scene:
        """Parse scene text and return a Scene AST.

        Raises ValueError (with the line number) on malformed input.
        """
        return _Cursor(src=src).parse_scene()
