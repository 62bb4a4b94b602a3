from conftest import make_issue, make_link
from jira_to_hook.application.core.services.link_classifier import LinkClassifier
from jira_to_hook.core.domain.events.transition_event import IssueLink
from jira_to_hook.core.domain.notification.value_objects.link_bucket import LinkBucket


def test_link_without_target_is_ignored():
    bucket, issue = LinkClassifier().classify(IssueLink(type_name="Release link"))

    assert bucket is LinkBucket.IGNORED
    assert issue is None


def test_md_issue_is_family_regardless_of_link_type():
    classifier = LinkClassifier()

    for type_name in ("Release link", "Blocks", None):
        bucket, issue = classifier.classify(make_link("MD-7", "Schema change", type_name))
        assert bucket is LinkBucket.FAMILY
        assert issue.key == "MD-7"


def test_release_link_outside_md_is_release_scoped():
    bucket, issue = LinkClassifier().classify(make_link("BE-3", "API", "Release link"))

    assert bucket is LinkBucket.RELEASE_SCOPED
    assert issue.key == "BE-3"


def test_other_link_types_are_ignored():
    classifier = LinkClassifier()

    for type_name in ("Blocks", "release link", "Release", None):
        bucket, issue = classifier.classify(make_link("BE-3", "API", type_name))
        assert bucket is LinkBucket.IGNORED
        assert issue.key == "BE-3"


def test_prefix_match_is_case_sensitive():
    bucket, _ = LinkClassifier().classify(IssueLink(type_name="Blocks", linked_issue=make_issue("md-1")))

    assert bucket is LinkBucket.IGNORED


def test_classification_does_not_depend_on_order():
    classifier = LinkClassifier()
    links = [make_link("MD-1"), make_link("BE-1"), make_link("BE-2", type_name="Blocks")]

    forward = [classifier.classify(link)[0] for link in links]
    backward = [classifier.classify(link)[0] for link in reversed(links)]

    assert forward == list(reversed(backward))
