from conftest import make_link, release_links
from jira_to_hook.application.core.services.scope_aggregator import RELEASE_CAPACITY, ScopeAggregator
from jira_to_hook.core.domain.events.transition_event import IssueLink, IssueRef

SCOPE_URL = (
    "https://jira.example.com/issues/?jql="
    "issue%20in%20linkedIssues(%22QA-1%22)%20AND%20project%20!%3D%20MD"
)


def test_empty_links_give_empty_result(links):
    result = ScopeAggregator(links).aggregate("QA-1", [])

    assert result.family_lines == ()
    assert result.release_lines == ()
    assert result.release_total_count == 0
    assert result.release_overflow_text == ""
    assert result.family_text == ""
    assert result.release_text == ""


def test_renders_family_line(links):
    result = ScopeAggregator(links).aggregate("QA-2", [make_link("MD-7", "Schema change", "Blocks")])

    assert result.family_lines == ("- *<https://jira.example.com/browse/MD-7|MD-7>* (_Schema change_)",)
    assert result.family_text == "\n- *<https://jira.example.com/browse/MD-7|MD-7>* (_Schema change_)"


def test_family_lines_are_not_capped(links):
    family = [make_link(f"MD-{n}", f"Migration {n}") for n in range(25)]

    result = ScopeAggregator(links).aggregate("QA-1", family)

    assert len(result.family_lines) == 25
    assert result.release_total_count == 0


def test_preserves_link_order(links):
    result = ScopeAggregator(links).aggregate(
        "QA-1", [make_link("BE-9"), make_link("BE-2"), make_link("BE-5")]
    )

    keys = ["BE-9", "BE-2", "BE-5"]
    assert len(result.release_lines) == len(keys)
    assert all(f"|{key}>" in line for key, line in zip(keys, result.release_lines))


def test_skips_ignored_links(links):
    result = ScopeAggregator(links).aggregate(
        "QA-1",
        [IssueLink(type_name="Release link"), make_link("BE-1", type_name="Blocks"), make_link("BE-2")],
    )

    assert result.release_total_count == 1
    assert len(result.release_lines) == 1
    assert result.family_lines == ()


def test_up_to_capacity_every_release_issue_is_listed(links):
    result = ScopeAggregator(links).aggregate("QA-1", release_links(RELEASE_CAPACITY))

    assert len(result.release_lines) == RELEASE_CAPACITY
    assert result.release_total_count == RELEASE_CAPACITY
    assert result.release_overflow_text == ""


def test_exactly_one_over_capacity_lists_the_last_issue_too(links):
    result = ScopeAggregator(links).aggregate("QA-1", release_links(RELEASE_CAPACITY + 1))

    assert len(result.release_lines) == RELEASE_CAPACITY + 1
    assert result.release_lines[-1] == "- *<https://jira.example.com/browse/BE-11|BE-11>* (_Backend change 11_)"
    assert result.release_overflow_text == ""


def test_larger_overflow_is_summarised(links):
    result = ScopeAggregator(links).aggregate("QA-1", release_links(RELEASE_CAPACITY + 2))

    assert len(result.release_lines) == RELEASE_CAPACITY
    assert result.release_total_count == 12
    assert result.release_overflow_text == f"- ...and <{SCOPE_URL}|other 2 issue(s)>"


def test_custom_capacity(links):
    result = ScopeAggregator(links).aggregate("QA-1", release_links(5), capacity=2)

    assert len(result.release_lines) == 2
    assert result.release_overflow_text.endswith("|other 3 issue(s)>")


def test_missing_summary_on_linked_issue_renders_empty(links):
    link = IssueLink(type_name="Release link", linked_issue=IssueRef(key="BE-1"))

    result = ScopeAggregator(links).aggregate("QA-1", [link])

    assert result.release_lines == ("- *<https://jira.example.com/browse/BE-1|BE-1>* (__)",)
