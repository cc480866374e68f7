#!/usr/bin/env python3
"""
Unit tests for grouping approved comments into threads.

Run with: pytest tests/test_comment_threads.py -v
"""

from helpers.comment_helper import build_threads


def _comment(comment_id, created_at, parent=None, approved=True):
    return {
        "commentId": comment_id,
        "targetType": "blog",
        "targetId": "blog-1",
        "name": f"User {comment_id}",
        "email": f"{comment_id}@example.com",
        "comment": "text",
        "parentCommentId": parent,
        "isApproved": approved,
        "createdAt": created_at,
    }


def test_top_level_newest_first_replies_oldest_first():
    items = [
        _comment("old", "2025-01-01T00:00:00"),
        _comment("new", "2025-01-03T00:00:00"),
        _comment("r2", "2025-01-05T00:00:00", parent="old"),
        _comment("r1", "2025-01-04T00:00:00", parent="old"),
    ]

    threads = build_threads(items)

    assert [c["commentId"] for c in threads["comments"]] == ["new", "old"]
    assert [r["commentId"] for r in threads["comments"][1]["replies"]] == ["r1", "r2"]
    assert threads["comments"][0]["replies"] == []
    assert [r["commentId"] for r in threads["replies"]] == ["r1", "r2"]


def test_unapproved_items_are_dropped():
    items = [
        _comment("c1", "2025-01-01T00:00:00"),
        _comment("r1", "2025-01-02T00:00:00", parent="c1", approved=False),
        _comment("c2", "2025-01-03T00:00:00", approved=False),
    ]

    threads = build_threads(items)

    assert [c["commentId"] for c in threads["comments"]] == ["c1"]
    assert threads["replies"] == []


def test_replies_under_hidden_comment_are_not_shown():
    items = [
        _comment("c1", "2025-01-01T00:00:00", approved=False),
        _comment("r1", "2025-01-02T00:00:00", parent="c1"),
    ]

    assert build_threads(items) == {"comments": [], "replies": []}


def test_public_view_has_no_email():
    threads = build_threads([_comment("c1", "2025-01-01T00:00:00")])

    comment = threads["comments"][0]
    assert "email" not in comment
    assert "targetId" not in comment
    assert set(comment) == {"commentId", "parentCommentId", "name", "comment", "createdAt", "replies"}
