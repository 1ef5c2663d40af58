"""Reply tree reconstruction.

Comments are stored as a flat collection where each reply points at its
parent. Reading a discussion means turning that flat, chronologically
ordered list back into nested reply trees. Everything here is pure: no I/O,
no logging, safe to call on any list of comments.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from huddle.domain.model import Comment, UserProfile
from huddle.domain.value import CommentId, UserId


@dataclass
class CommentNode:
    """Comment with its author projection and direct replies."""

    comment: Comment
    author: UserProfile | None = None
    replies: list["CommentNode"] = field(default_factory=list)


@dataclass
class EventComments:
    """All discussion threads of an event."""

    comments: list[CommentNode]
    total: int  # Non-deleted comments


@dataclass
class CommentThread:
    """A single thread, rooted at its top-level comment."""

    root: CommentNode
    # Replies whose parent is missing from the thread, shown at top level
    detached: list[CommentNode]
    total: int  # Non-deleted comments


def build_thread(
    comments: Sequence[Comment],
    root_id: CommentId | None = None,
    authors: Mapping[UserId, UserProfile] | None = None,
) -> list[CommentNode]:
    """Materialize reply trees from a flat chronological list.

    Algorithm:
    1. Index every comment by id (the flat list is the arena)
    2. Walk the list again in order, attaching each comment to its
       parent's replies, so siblings keep chronological order

    A comment whose parent is not in the input is not dropped: it is
    returned as an extra root after the real ones.

    Args:
        comments: Comments of one event or one thread, oldest first
        root_id: Thread root to select; None selects every top-level comment
        authors: Optional author profiles to attach to each node

    Returns:
        Root nodes in chronological order, followed by detached replies
    """
    authors = authors or {}
    nodes = {
        comment.id: CommentNode(comment=comment, author=authors.get(comment.author_id))
        for comment in comments
    }

    roots: list[CommentNode] = []
    detached: list[CommentNode] = []
    for comment in comments:
        node = nodes[comment.id]
        if root_id is None:
            is_root = comment.parent_id is None
        else:
            is_root = comment.id == root_id

        if is_root:
            roots.append(node)
            continue

        parent = nodes.get(comment.parent_id) if comment.parent_id else None
        if parent is None:
            detached.append(node)
        else:
            parent.replies.append(node)

    return roots + detached


def prune_deleted(nodes: Iterable[CommentNode]) -> list[CommentNode]:
    """Drop deleted comments that no longer carry any live reply.

    Deleted comments with live descendants are kept as placeholders so
    their replies stay in place.
    """
    kept = []
    for node in nodes:
        node.replies = prune_deleted(node.replies)
        if not node.comment.is_deleted or node.replies:
            kept.append(node)
    return kept


def count_nodes(nodes: Iterable[CommentNode], include_deleted: bool = True) -> int:
    """Count the nodes of a forest."""
    total = 0
    for node in nodes:
        if include_deleted or not node.comment.is_deleted:
            total += 1
        total += count_nodes(node.replies, include_deleted=include_deleted)
    return total
