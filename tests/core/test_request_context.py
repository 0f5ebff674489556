# tests/core/test_request_context.py
"""
Testes do log estruturado e dos warnings do RequestContext.
"""

from datetime import datetime


def test_log_appends_structured_event(make_ctx):
    """
    Verifica que eventos incluem identidade da requisição e campos extras.

    Invariantes:
        - Todo evento carrega `request_id`, `instance`, `scope` e `level`
        - Campos extras são anexados sem sobrescrever os canônicos
    """
    ctx = make_ctx()
    ctx.log(scope="fields", level="INFO", message="Campos resolvidos", fields=["name"])

    assert len(ctx.events) == 1
    event = ctx.events[0]
    assert event["request_id"] == "req-test-001"
    assert event["instance"] == "users"
    assert event["scope"] == "fields"
    assert event["level"] == "INFO"
    assert event["fields"] == ["name"]
    datetime.fromisoformat(event["timestamp"])


def test_warnings_grouped_by_scope(make_ctx):
    ctx = make_ctx()
    ctx.add_warning(scope="fields.bio", message="a")
    ctx.add_warning(scope="fields.bio", message="b")
    ctx.add_warning(scope="fields", message="c")

    assert ctx.warnings == {"fields.bio": ["a", "b"], "fields": ["c"]}


def test_contexts_are_isolated(make_ctx):
    first = make_ctx()
    second = make_ctx()
    first.log(scope="fields", level="INFO", message="x")
    assert second.events == []
