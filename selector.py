#
# File: selector.py
# Revision: 2
# Description: Interactive fuzzy selection of a repository. Matching is done
# by prompt_toolkit's FuzzyCompleter over the labels; picking an entry inserts
# its full path, which is mapped back to an index in the repository list.
#

from typing import Callable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion, FuzzyCompleter
from prompt_toolkit.document import Document
from prompt_toolkit.output import create_output

from repo_types import Repo
from utils.errors import NoMatchError, SelectionAborted

PROMPT_MESSAGE = "select a repository:  "

PromptFunc = Callable[[str, Completer], str]

def repo_label(repo: Repo) -> str:
    """The text shown and matched for a repository."""
    return repo.short_name or repo.full_path

class RepoCompleter(Completer):
    """Offers every repository label, with the full path as meta text."""
    def __init__(self, repos: List[Repo]):
        self._repos = repos

    def get_completions(self, document, complete_event):
        for repo in self._repos:
            yield Completion(repo_label(repo), start_position=0, display_meta=repo.full_path)

class RepoPathCompleter(Completer):
    """
    Fuzzy-matches the typed text against repository labels, but inserts the
    full path of the chosen entry. Labels can repeat; full paths cannot, so
    the accepted text always identifies a single repository.
    """
    def __init__(self, repos: List[Repo]):
        # WORD=True so labels containing '/', '-' or '.' are matched as a whole.
        self._fuzzy = FuzzyCompleter(RepoCompleter(repos), WORD=True)

    def get_completions(self, document, complete_event):
        for match in self._fuzzy.get_completions(document, complete_event):
            yield Completion(
                match.display_meta_text,
                start_position=match.start_position,
                display=match.display,
                display_meta=match.display_meta,
            )

def build_completer(repos: List[Repo]) -> RepoPathCompleter:
    return RepoPathCompleter(repos)

def resolve_selection(repos: List[Repo], text: str, completer: Optional[Completer] = None) -> int:
    """
    Maps accepted prompt input to a repository index.

    A full path (what picking a menu entry inserts) identifies one repository.
    Typed text that equals a label resolves to that label's first occurrence;
    anything else takes the best fuzzy completion.
    """
    paths = [r.full_path for r in repos]
    labels = [repo_label(r) for r in repos]
    text = text.strip()
    if text and text in paths:
        return paths.index(text)
    if text in labels:
        return labels.index(text)

    completer = completer or build_completer(repos)
    completions = list(completer.get_completions(Document(text), CompleteEvent()))
    if not completions:
        raise NoMatchError(f"no repository matches '{text}'")
    return paths.index(completions[0].text)

def _prompt_on_terminal(message: str, completer: Completer) -> str:
    """Runs the prompt on the terminal so stdout can be captured by the shell."""
    session = PromptSession(output=create_output(always_prefer_tty=True))
    return session.prompt(
        message,
        completer=completer,
        complete_while_typing=True,
        pre_run=lambda: session.default_buffer.start_completion(select_first=False),
    )

def select_repository(repos: List[Repo], message: str = PROMPT_MESSAGE,
                      prompt_func: Optional[PromptFunc] = None) -> int:
    """
    Asks the user to pick a repository and returns its index in `repos`.

    Raises:
        SelectionAborted: the prompt was cancelled with Ctrl-C or Ctrl-D.
        NoMatchError: there is nothing to choose from or the input matched nothing.
    """
    if not repos:
        raise NoMatchError("no repositories found")

    completer = build_completer(repos)
    prompt_func = prompt_func or _prompt_on_terminal
    try:
        text = prompt_func(message, completer)
    except (KeyboardInterrupt, EOFError):
        raise SelectionAborted()
    return resolve_selection(repos, text, completer)
