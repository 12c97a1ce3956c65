import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import audit_solver as audit


def test_audit_passes_for_optimal_solver(capsys):
    assert audit.audit_solver(6) == 0
    out = capsys.readouterr().out
    assert "Total de coups analysés : 120" in out
    assert "Erreurs détectées : 0" in out


def test_audit_reports_bad_moves(monkeypatch, capsys):
    monkeypatch.setattr(audit, "solve_moves", lambda levels: [(0, 2), (0, 2)])
    assert audit.audit_solver(2) > 0
    out = capsys.readouterr().out
    assert "refusé" in out


def test_check_invariants():
    assert audit.check_invariants(((3, 1), (2,), ()), 3) == []
    problems = audit.check_invariants(((1, 3), (), ()), 3)
    assert any("not strictly decreasing" in p for p in problems)
    assert any("expected 1..3" in p for p in problems)
