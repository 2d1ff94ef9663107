import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from repo_types import Repo
from selector import PROMPT_MESSAGE, build_completer, resolve_selection, select_repository
from utils.errors import NoMatchError, SelectionAborted

REPOS = [
    Repo.from_path("/git/tools/gitjump"),
    Repo.from_path("/git/work/api"),
    Repo.from_path("/git/work/api-legacy"),
    Repo.from_path("/git/infra/terraform-modules"),
]

def answer(text):
    calls = []
    def prompt_func(message, completer):
        calls.append((message, completer))
        return text
    prompt_func.calls = calls
    return prompt_func

def test_exact_label_is_selected():
    assert select_repository(REPOS, prompt_func=answer("work/api")) == 1

def test_exact_match_wins_over_fuzzy_candidates():
    assert resolve_selection(REPOS, "work/api-legacy") == 2

def test_fuzzy_input_selects_best_completion():
    assert select_repository(REPOS, prompt_func=answer("gjmp")) == 0
    assert select_repository(REPOS, prompt_func=answer("tfmod")) == 3

def test_fuzzy_match_is_case_insensitive():
    assert resolve_selection(REPOS, "GITJ") == 0

def test_surrounding_whitespace_is_ignored():
    assert resolve_selection(REPOS, "  infra/terraform-modules\n") == 3

def test_no_match_raises():
    with pytest.raises(NoMatchError):
        select_repository(REPOS, prompt_func=answer("zzzz"))

@pytest.mark.parametrize("exc", [KeyboardInterrupt, EOFError])
def test_cancel_raises_selection_aborted(exc):
    def prompt_func(message, completer):
        raise exc()
    with pytest.raises(SelectionAborted):
        select_repository(REPOS, prompt_func=prompt_func)

def test_empty_list_does_not_prompt():
    prompt_func = answer("anything")
    with pytest.raises(NoMatchError):
        select_repository([], prompt_func=prompt_func)
    assert prompt_func.calls == []

def test_prompt_receives_message_and_completer():
    prompt_func = answer("tools/gitjump")
    select_repository(REPOS, prompt_func=prompt_func)
    message, completer = prompt_func.calls[0]
    assert message == PROMPT_MESSAGE
    completions = list(completer.get_completions(Document(""), CompleteEvent()))
    assert [c.display_text for c in completions] == [r.short_name for r in REPOS]
    assert [c.text for c in completions] == [r.full_path for r in REPOS]

def test_completion_shows_label_and_inserts_full_path():
    completions = list(build_completer(REPOS).get_completions(Document("gitjump"), CompleteEvent()))
    assert [c.text for c in completions] == ["/git/tools/gitjump"]
    assert completions[0].display_text == "tools/gitjump"
    assert completions[0].display_meta_text == "/git/tools/gitjump"

def test_repo_without_short_name_uses_full_path():
    repos = [Repo(full_path="/standalone")]
    assert resolve_selection(repos, "/standalone") == 0

def test_repos_sharing_a_label_can_each_be_selected():
    repos = [Repo.from_path("/a/team/api"), Repo.from_path("/b/team/api")]
    assert repos[0].short_name == repos[1].short_name
    completions = list(build_completer(repos).get_completions(Document("api"), CompleteEvent()))
    picked = {select_repository(repos, prompt_func=answer(c.text)) for c in completions}
    assert picked == {0, 1}
    assert select_repository(repos, prompt_func=answer("/b/team/api")) == 1

def test_typed_duplicate_label_resolves_to_first_occurrence():
    repos = [Repo.from_path("/a/team/api"), Repo.from_path("/b/team/api")]
    assert resolve_selection(repos, "team/api") == 0
