"""Tiny terminal UI helpers (prompt_toolkit-based).

These collect the inputs for a reassignment (rows, target category, keyword
string) and stay decoupled from the learning and reassignment logic so they
are easy to test in isolation with a pipe input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style
from prompt_toolkit.validation import ValidationError, Validator

from .errors import StatementSorterError
from .learning import parse_keywords, resolve_category

# ----------------------------------------------------------------------------
# Session plumbing
# ----------------------------------------------------------------------------


def _session(session: PromptSession | None, kb: KeyBindings) -> PromptSession:
    if session is None:
        return PromptSession(key_bindings=kb)
    return PromptSession(
        input=getattr(session, "input", None),
        output=getattr(session, "output", None),
        key_bindings=kb,
    )


def _cancel_bindings() -> KeyBindings:
    kb = KeyBindings()

    @kb.add("escape")
    def _(event) -> None:  # pragma: no cover - exercised indirectly
        event.app.exit(result=None)

    @kb.add("c-c", eager=True)
    def _(event) -> None:  # pragma: no cover - exercised indirectly
        event.app.exit(result=None)

    return kb


# ----------------------------------------------------------------------------
# Row selection
# ----------------------------------------------------------------------------


def parse_row_selection(text: str, *, max_row: int) -> list[int]:
    """Parse ``"1, 3-5"`` into ``[1, 3, 4, 5]`` (1-based, de-duplicated).

    Raises ``ValueError`` for malformed parts or numbers outside
    ``1..max_row``.
    """

    rows: list[int] = []
    for part in text.replace(" ", "").split(","):
        if not part:
            continue
        lo_s, sep, hi_s = part.partition("-")
        if not lo_s.isdigit() or (sep and not hi_s.isdigit()):
            raise ValueError(f"Not a row number or range: {part!r}")
        lo = int(lo_s)
        hi = int(hi_s) if sep else lo
        if lo > hi:
            lo, hi = hi, lo
        if lo < 1 or hi > max_row:
            raise ValueError(f"Rows must be between 1 and {max_row}: {part!r}")
        for n in range(lo, hi + 1):
            if n not in rows:
                rows.append(n)
    return rows


def prompt_row_selection(
    *,
    max_row: int,
    session: PromptSession | None = None,
    message: str = "Rows to reassign (e.g. 1,3-5; Enter to finish): ",
) -> list[int] | None:
    """Ask for row numbers; ``None`` when the user is done (empty input or Esc)."""

    class _V(Validator):
        def validate(self, document) -> None:
            try:
                parse_row_selection(document.text, max_row=max_row)
            except ValueError as e:
                raise ValidationError(message=str(e)) from e

    sess = _session(session, _cancel_bindings())
    text = sess.prompt(message, validator=_V(), validate_while_typing=False)
    if text is None or not text.strip():
        return None
    return parse_row_selection(text, max_row=max_row)


# ----------------------------------------------------------------------------
# Category selection (existing or new)
# ----------------------------------------------------------------------------

CREATE_SENTINEL = "+ New category..."


class CreateCategoryRequest:
    """Return type for creation flow: carries the typed candidate name."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:  # pragma: no cover - trivial repr
        return f"CreateCategoryRequest(name={self.name!r})"


def select_category_or_create(
    categories: Sequence[str] | Iterable[str],
    *,
    default: str = "",
    message: str = "Assign selected to category: ",
    session: PromptSession | None = None,
    allow_create: bool = True,
) -> str | CreateCategoryRequest:
    """Prompt the user to choose a category; optionally offer creation.

    Returns either a selected category string or a ``CreateCategoryRequest``
    when the user typed a name that is not in ``categories`` or picked the
    explicit "+ New category..." option.
    """

    words = list(categories)
    if allow_create:
        words = words + [CREATE_SENTINEL]
    lower_set = {w.lower(): w for w in words if w != CREATE_SENTINEL}

    completer = WordCompleter(words, ignore_case=True, match_middle=True, sentence=False)

    class _SuggestOrCreate(AutoSuggest):
        def get_suggestion(self, buffer, document):
            text = document.text
            if not text or text.lower() in lower_set:
                return None
            cand = _best_prefix_match(text)
            if cand:
                return Suggestion(cand[len(text) :])
            if allow_create:
                return Suggestion(f"  [Create '{text}'?]")
            return None

    def _best_prefix_match(text: str) -> str | None:
        if not text:
            return None
        lower = text.lower()
        for w in words:
            wl = w.lower()
            if wl == lower:
                return None
            if wl.startswith(lower) and w != CREATE_SENTINEL:
                return w
        return None

    kb = KeyBindings()

    @kb.add("tab", eager=True)
    def _(event) -> None:  # pragma: no cover - integration path
        b = event.app.current_buffer
        cand = _best_prefix_match(b.document.text)
        if cand:
            b.insert_text(cand[len(b.document.text) :])
        elif b.complete_state is None:
            b.start_completion(select_first=True)
        else:
            b.complete_next()

    @kb.add("enter", eager=True)
    def _(event) -> None:  # pragma: no cover - integration path
        b = event.app.current_buffer
        cs = b.complete_state
        if cs is not None and cs.current_completion is not None:
            b.apply_completion(cs.current_completion)
        else:
            # Enter commits the inline prefix completion, never the create hint.
            cand = _best_prefix_match(b.document.text)
            if cand:
                b.insert_text(cand[len(b.document.text) :])
        b.validate_and_handle()

    sess = _session(session, kb)
    result = sess.prompt(
        message,
        completer=completer,
        default=default,
        auto_suggest=_SuggestOrCreate(),
        style=Style.from_dict({"auto-suggestion": "fg:#888888"}),
        key_bindings=kb,
    )

    result = result.strip() or default
    if allow_create:
        if result == CREATE_SENTINEL:
            return CreateCategoryRequest("")
        if result.lower() not in lower_set:
            return CreateCategoryRequest(result)
    return lower_set.get(result.lower(), result)


def prompt_new_category_name(
    *,
    initial: str = "",
    session: PromptSession | None = None,
    message: str = "New category name (Enter to save • Esc to cancel): ",
) -> str | None:
    """Collect a new category name; returns ``None`` when canceled."""

    class _V(Validator):
        def validate(self, document) -> None:
            try:
                resolve_category(document.text)
            except StatementSorterError as e:
                raise ValidationError(message=str(e)) from e

    sess = _session(session, _cancel_bindings())
    value = sess.prompt(message, default=initial, validator=_V(), validate_while_typing=False)
    return None if value is None else resolve_category(value)


# ----------------------------------------------------------------------------
# Keyword entry
# ----------------------------------------------------------------------------


def prompt_keywords(
    suggestions: Sequence[str],
    *,
    category: str,
    session: PromptSession | None = None,
) -> str | None:
    """Ask for comma-separated keywords to associate with ``category``.

    The top suggestion is pre-filled; all suggestions are offered for
    completion. Returns the raw string (validated by
    :func:`~statement_sorter.learning.parse_keywords`) or ``None`` on cancel.
    """

    class _V(Validator):
        def validate(self, document) -> None:
            try:
                parse_keywords(document.text)
            except StatementSorterError as e:
                raise ValidationError(
                    message="Enter at least one keyword of 3+ characters that is not only digits"
                ) from e

    hint = ", ".join(suggestions) if suggestions else "none"
    message = f"Keywords for {category!r} (comma separated; suggested: {hint}): "
    sess = _session(session, _cancel_bindings())
    return sess.prompt(
        message,
        default=suggestions[0] if suggestions else "",
        completer=WordCompleter(list(suggestions), ignore_case=True, sentence=True),
        validator=_V(),
        validate_while_typing=False,
    )


__all__ = [
    "CREATE_SENTINEL",
    "CreateCategoryRequest",
    "parse_row_selection",
    "prompt_keywords",
    "prompt_new_category_name",
    "prompt_row_selection",
    "select_category_or_create",
]
