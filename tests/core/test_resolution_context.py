# tests/core/test_resolution_context.py
"""
Testes do log estruturado e dos warnings do ResolutionContext.
"""

import pytest

try:
    from variant_forge.core.resolution_context import STAGE_LOAD, STAGE_VALIDATE, ResolutionContext
except Exception as e:  # noqa: BLE001
    ResolutionContext = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que a API de logging e warnings do ResolutionContext esteja disponível.

    Invariantes:
        - Se a API existe, a função não produz efeitos colaterais
        - Se a API está ausente, o teste falha imediatamente
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing ResolutionContext logging/warnings API. Implement:\n"
            "- src/variant_forge/core/resolution_context.py (log, add_warning, events, warnings)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_structured_log_event(fixed_ctx):
    """
    Verifica que chamadas a `log` produzem eventos estruturados.

    Invariantes:
        - Cada evento inclui `run_id` e `stage`
        - Campos extras são preservados sem filtragem implícita
    """
    _require_imports()
    fixed_ctx.log(stage=STAGE_LOAD, level="INFO", message="source loaded", origin="key.properties", keys=4)
    ev = fixed_ctx.events[-1]
    assert ev["run_id"] == "resolution-test-001"
    assert ev["stage"] == STAGE_LOAD
    assert ev["level"] == "INFO"
    assert ev["message"] == "source loaded"
    assert ev["origin"] == "key.properties"
    assert ev["keys"] == 4
    assert "timestamp" in ev


def test_warnings_are_grouped_by_stage(fixed_ctx):
    _require_imports()
    fixed_ctx.add_warning(stage=STAGE_VALIDATE, message="w1")
    fixed_ctx.add_warning(stage=STAGE_VALIDATE, message="w2")
    fixed_ctx.add_warning(stage=STAGE_LOAD, message="w3")
    assert fixed_ctx.warnings == {STAGE_VALIDATE: ["w1", "w2"], STAGE_LOAD: ["w3"]}


def test_events_for_filters_by_stage(fixed_ctx):
    _require_imports()
    fixed_ctx.log(stage=STAGE_LOAD, level="INFO", message="a")
    fixed_ctx.log(stage=STAGE_VALIDATE, level="ERROR", message="b")
    assert [e["message"] for e in fixed_ctx.events_for(STAGE_VALIDATE)] == ["b"]


def test_new_contexts_are_isolated():
    _require_imports()
    a = ResolutionContext.new(variant="debug")
    b = ResolutionContext.new(variant="debug")
    a.log(stage=STAGE_LOAD, level="INFO", message="only in a")
    assert a.run_id != b.run_id
    assert b.events == []
    assert a.created_at.tzinfo is not None
