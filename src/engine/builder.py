"""
Pure state transitions for the word builder.

Every function takes a WordBuilderState and a read-only WordIndex and
returns a brand-new state. Letter sets are always recomputed from the
answer and the index, never patched from the previous step, so they can
never drift out of sync with the answer. Rejected edits raise a
WordBuilderError before anything is built, leaving the caller's state
valid.
"""

import logging
from typing import List, Optional

from ..index.models import WordIndex
from .errors import InvalidIndex, InvalidLetter, InvalidPosition
from .models import DEAD_END_MESSAGE, EngineConfig, StateSnapshot, WordBuilderState
from .scan import scan_embedded

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = EngineConfig()


def check_valid_word(state: WordBuilderState, index: WordIndex) -> bool:
    """True if the answer is non-empty and a complete corpus word."""
    return len(state.answer) > 0 and index.contains_word(state.answer)


def _collect_completions(answer: str, index: WordIndex, limit: int) -> List[str]:
    """Up to ``limit`` forward and ``limit`` reverse matches longer than ``answer``."""
    completions: List[str] = []

    forward = 0
    for word in index.find_words_with_prefix(answer):
        if forward >= limit:
            break
        if len(word) > len(answer) and word not in completions:
            completions.append(word)
            forward += 1

    backward = 0
    for word in index.find_words_with_suffix(answer):
        if backward >= limit:
            break
        if len(word) > len(answer) and word not in completions:
            completions.append(word)
            backward += 1

    return completions


def _suggest(answer: str, completions: List[str]) -> str:
    """Hint derived from the shortest completion (``completions`` is sorted)."""
    shortest = completions[0]
    if shortest.startswith(answer) and len(shortest) > len(answer):
        return f"Try adding '{shortest[len(answer)]}' as suffix"
    idx = shortest.find(answer)
    if idx > 0:
        return f"Try adding '{shortest[idx - 1]}' as prefix"
    return ""


def update_sets(
    state: WordBuilderState,
    index: WordIndex,
    config: Optional[EngineConfig] = None,
) -> WordBuilderState:
    """
    Recompute letter sets, completions and suggestion for the current answer.

    Runs the forward walk, the reverse walk and the embedded scan in full,
    then merges them. The answer counts as a dead end only when all three
    found nothing; in that case (or when the answer is already a word) the
    suggestion is replaced by DEAD_END_MESSAGE. Empty letter sets are a
    normal outcome and are never padded with fallback letters.

    Args:
        state: State whose ``answer`` drives the computation
        index: Read-only word index
        config: Engine tunables; defaults to EngineConfig()

    Returns:
        A new state with every derived field replaced
    """
    config = config or DEFAULT_CONFIG
    answer = state.answer
    is_valid_word = check_valid_word(state, index)

    if not answer:
        groups = index.initial_groups()
        return state.model_copy(update={
            "prefix_set": frozenset(groups.prepend),
            "suffix_set": frozenset(groups.append),
            "is_valid_word": False,
            "valid_completions": (),
            "suggestion": "",
            "has_continuation": bool(groups.prepend or groups.append),
        })

    # 1. Forward walk: letters that extend a word start
    suffix_set = set(index.next_letters(answer))
    found_forward = bool(suffix_set)

    # 2. Reverse walk: letters that extend a word end
    prefix_set = set(index.previous_letters(answer))
    found_reverse = bool(prefix_set)

    completions = _collect_completions(answer, index, config.max_completions)

    # 3. Embedded scan: occurrences strictly inside longer words
    embedded = scan_embedded(index.words, answer, workers=config.workers, executor=config.executor)
    prefix_set |= embedded.prefix_letters
    suffix_set |= embedded.suffix_letters

    found_valid_continuation = found_forward or found_reverse or embedded.found

    suggestion = ""
    if completions and not is_valid_word:
        completions.sort(key=len)
        suggestion = _suggest(answer, completions)

    if is_valid_word or not found_valid_continuation:
        if not found_valid_continuation:
            logger.debug("Dead end at %r", answer)
        suggestion = DEAD_END_MESSAGE

    return state.model_copy(update={
        "prefix_set": frozenset(prefix_set),
        "suffix_set": frozenset(suffix_set),
        "is_valid_word": is_valid_word,
        "valid_completions": tuple(completions),
        "suggestion": suggestion,
        "has_continuation": found_valid_continuation,
    })


def _transition_message(state: WordBuilderState, edit: str, config: EngineConfig) -> str:
    message = f"Step {state.step}: {edit} -> Answer: {state.answer}"
    if state.is_valid_word:
        message += f"\n*** '{state.answer}' is a valid word! ***"
    elif state.valid_completions and config.message_completions:
        shown = state.valid_completions[:config.message_completions]
        message += f"\nPossible completions: {', '.join(shown)}"
    return message


def _apply_edit(
    state: WordBuilderState,
    index: WordIndex,
    answer: str,
    edit: str,
    config: EngineConfig,
) -> WordBuilderState:
    new_state = state.model_copy(update={"answer": answer})
    new_state = update_sets(new_state, index, config)
    new_state = new_state.model_copy(update={"step": state.step + 1})
    message = _transition_message(new_state, edit, config)
    return new_state.model_copy(update={"message": message})


def add_letter(
    state: WordBuilderState,
    index: WordIndex,
    letter: str,
    position: str,
    config: Optional[EngineConfig] = None,
) -> WordBuilderState:
    """
    Prepend or append one letter.

    Args:
        state: Current state (not modified)
        index: Read-only word index
        letter: Single letter; lower-cased before validation
        position: "prefix" or "suffix"
        config: Engine tunables

    Returns:
        The next state

    Raises:
        InvalidPosition: If ``position`` is not "prefix" or "suffix"
        InvalidLetter: If ``letter`` is not currently allowed at ``position``
    """
    config = config or DEFAULT_CONFIG
    letter = letter.lower()

    if position == "prefix":
        if letter not in state.prefix_set:
            raise InvalidLetter(letter, position)
        answer = letter + state.answer
    elif position == "suffix":
        if letter not in state.suffix_set:
            raise InvalidLetter(letter, position)
        answer = state.answer + letter
    else:
        raise InvalidPosition(position)

    return _apply_edit(state, index, answer, f"Added '{letter}' as {position}", config)


def remove_letter(
    state: WordBuilderState,
    index: WordIndex,
    position: int,
    config: Optional[EngineConfig] = None,
) -> WordBuilderState:
    """
    Remove the letter at ``position`` (any index, including the last).

    Raises:
        InvalidIndex: If ``position`` is outside ``[0, len(answer))``
    """
    config = config or DEFAULT_CONFIG
    if position < 0 or position >= len(state.answer):
        raise InvalidIndex(position, state.answer)

    letter = state.answer[position]
    answer = state.answer[:position] + state.answer[position + 1:]
    return _apply_edit(state, index, answer, f"Removed '{letter}' at index {position}", config)


def new_state(index: WordIndex, config: Optional[EngineConfig] = None) -> WordBuilderState:
    """Fresh session state: empty answer at step 0 with seeded letter sets."""
    return update_sets(WordBuilderState(), index, config)


def reset(
    state: WordBuilderState,
    index: WordIndex,
    config: Optional[EngineConfig] = None,
) -> WordBuilderState:
    """Discard ``state`` and start over against ``index``."""
    return new_state(index, config).model_copy(update={"message": "Reset"})


def get_current_state(
    state: WordBuilderState,
    config: Optional[EngineConfig] = None,
) -> StateSnapshot:
    """Project a state into plain, sorted collections for collaborators."""
    config = config or DEFAULT_CONFIG
    return StateSnapshot(
        answer=state.answer,
        prefix_set=sorted(state.prefix_set),
        suffix_set=sorted(state.suffix_set),
        step=state.step,
        is_valid_word=state.is_valid_word,
        valid_completions=list(state.valid_completions[:config.display_completions]),
        suggestion=state.suggestion,
    )
