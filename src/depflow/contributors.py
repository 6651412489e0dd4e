"""Build reviewer -> author graphs from pull request history."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .models import ContributorNode, Graph, GraphEdge


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 timestamp; anything unparsable counts as absent.

    Naive datetimes are taken to be UTC so they compare with aware ones.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def latest(a: datetime | None, b: datetime | None) -> datetime | None:
    """Return the later of two timestamps; ``None`` never wins over a value."""
    if a is None:
        return b
    if b is None:
        return a
    return a if a >= b else b


@dataclass(frozen=True)
class Actor:
    """A pull request author or reviewer."""

    login: str | None
    avatar_url: str | None = None

    @classmethod
    def from_dict(cls, data) -> "Actor | None":
        if not isinstance(data, dict):
            return None
        return cls(login=data.get("login") or None, avatar_url=data.get("avatarUrl"))


@dataclass(frozen=True)
class Review:
    author: Actor | None = None
    submitted_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Review":
        return cls(
            author=Actor.from_dict(data.get("author")),
            submitted_at=parse_timestamp(data.get("submittedAt")),
        )


@dataclass(frozen=True)
class PullRequest:
    author: Actor | None = None
    created_at: datetime | None = None
    reviews: tuple[Review, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "PullRequest":
        """Decode one pull request node of the GraphQL response.

        ``reviews`` may be a plain list or a ``{"nodes": [...]}`` connection.
        """
        raw_reviews = data.get("reviews") or []
        if isinstance(raw_reviews, dict):
            raw_reviews = raw_reviews.get("nodes") or []
        return cls(
            author=Actor.from_dict(data.get("author")),
            created_at=parse_timestamp(data.get("createdAt")),
            reviews=tuple(Review.from_dict(r) for r in raw_reviews if isinstance(r, dict)),
        )


def pull_requests_from_payload(payload) -> list[PullRequest]:
    """Decode pull requests from a GraphQL response, connection or list.

    Any missing level (no repository, no pullRequests) yields an empty list.
    """
    nodes = payload
    if isinstance(nodes, dict) and "data" in nodes:
        nodes = (nodes.get("data") or {}).get("repository") or {}
    if isinstance(nodes, dict) and "pullRequests" in nodes:
        nodes = nodes.get("pullRequests") or {}
    if isinstance(nodes, dict):
        nodes = nodes.get("nodes") or []
    if not isinstance(nodes, list):
        return []
    return [PullRequest.from_dict(pr) for pr in nodes if isinstance(pr, dict)]


@dataclass
class _Contributor:
    avatar_url: str | None = None
    pr_count: int = 0
    review_count: int = 0
    last_activity: datetime | None = None

    def seen_with(self, actor: Actor, when: datetime | None) -> None:
        if actor.avatar_url:
            self.avatar_url = actor.avatar_url
        self.last_activity = latest(self.last_activity, when)


@dataclass
class ContributorGraphBuilder:
    """Accumulates per-login counters and reviewer -> author edges.

    Self-reviews neither create an edge nor count towards ``review_count``.
    """

    contributors: dict[str, _Contributor] = field(default_factory=dict)
    edge_keys: dict[tuple[str, str], None] = field(default_factory=dict)  # Ordered set

    def _upsert(self, actor: Actor, when: datetime | None) -> _Contributor:
        contributor = self.contributors.setdefault(actor.login, _Contributor())
        contributor.seen_with(actor, when)
        return contributor

    def add_pull_request(self, pr: PullRequest) -> None:
        author = pr.author
        if author is None or not author.login:
            return

        self._upsert(author, pr.created_at).pr_count += 1

        for review in pr.reviews:
            reviewer = review.author
            if reviewer is None or not reviewer.login or reviewer.login == author.login:
                continue
            self._upsert(reviewer, review.submitted_at).review_count += 1
            self.edge_keys.setdefault((reviewer.login, author.login), None)

    def build(self) -> Graph:
        nodes = tuple(
            ContributorNode(
                id=login,
                label=login,
                avatar_url=c.avatar_url,
                pr_count=c.pr_count,
                review_count=c.review_count,
                last_activity=c.last_activity,
            )
            for login, c in self.contributors.items()
        )
        edges = tuple(GraphEdge.between(source, target) for source, target in self.edge_keys)
        return Graph(nodes=nodes, edges=edges)


def build_contributor_graph(pull_requests: Iterable[PullRequest]) -> Graph:
    """Build a graph of who reviews whose pull requests.

    Args:
        pull_requests: Pull requests; entries without an author login are skipped.

    Returns:
        Graph of ``ContributorNode`` nodes and deduplicated reviewer -> author edges.
    """
    builder = ContributorGraphBuilder()
    for pr in pull_requests:
        builder.add_pull_request(pr)
    return builder.build()
