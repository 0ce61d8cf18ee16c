"""Logger structuré pour le debug."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from binary_puzzle.config import PATHS
from binary_puzzle.lib.s3_solver.types import SolverOutput


@dataclass
class SolveLog:
    """Log d'une résolution."""
    solve_index: int
    timestamp: str
    duration: float
    solved: bool
    line_count: int
    column_count: int
    ruleset_passes: int
    ruleset_cells: int
    backtracking_used: bool
    backtracking_cells: int
    backtracking_nodes: int
    rule_hits: Dict[str, int]
    initial: str
    final: str


class DebugLogger:
    """Session-scoped JSON Lines writer: one record per solve, plus a session report."""

    def __init__(self, log_dir: Optional[str] = None):
        self.log_dir = Path(log_dir or PATHS['logs'])
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.solves_path = self.log_dir / f"solves_{self.session_id}.jsonl"
        self.solves: List[SolveLog] = []

    def log_solve(self, output: SolverOutput) -> SolveLog:
        """Log une résolution (ajoutée au fichier JSONL de la session)."""
        stats = output.stats
        log = SolveLog(
            solve_index=len(self.solves),
            timestamp=datetime.now().isoformat(),
            duration=stats.duration,
            solved=output.solved,
            line_count=output.metadata.get("line_count", 0),
            column_count=output.metadata.get("column_count", 0),
            ruleset_passes=stats.ruleset_passes,
            ruleset_cells=stats.ruleset_cells,
            backtracking_used=stats.backtracking_used,
            backtracking_cells=stats.backtracking_cells,
            backtracking_nodes=stats.backtracking_nodes,
            rule_hits={rule.value: hits for rule, hits in stats.rule_hits.items()},
            initial=output.metadata.get("initial", ""),
            final=output.metadata.get("final", ""),
        )
        self.solves.append(log)
        with open(self.solves_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(asdict(log), ensure_ascii=False) + "\n")
        return log

    def save_session(self) -> str:
        """
        Writes ``session_<id>.json``: the session summary, how often each rule
        fired, how many cells each phase resolved, and the unsolved grids.
        """
        session_file = self.log_dir / f"session_{self.session_id}.json"
        data = {
            "session_id": self.session_id,
            "summary": self.get_summary(),
            "rule_hits": self.get_rule_totals(),
            "cells_by_phase": {
                "ruleset": sum(s.ruleset_cells for s in self.solves),
                "backtracking": sum(s.backtracking_cells for s in self.solves),
            },
            "unsolved": [
                {"solve_index": s.solve_index, "final": s.final}
                for s in self.solves if not s.solved
            ],
        }
        with open(session_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(session_file)

    def get_rule_totals(self) -> Dict[str, int]:
        """Somme des déclenchements par règle sur toute la session."""
        totals: Dict[str, int] = {}
        for log in self.solves:
            for rule, hits in log.rule_hits.items():
                totals[rule] = totals.get(rule, 0) + hits
        return totals

    def get_summary(self) -> Dict[str, Any]:
        """Retourne un résumé de la session."""
        solved = sum(1 for s in self.solves if s.solved)
        return {
            "session_id": self.session_id,
            "solves": len(self.solves),
            "solved": solved,
            "backtracking_used": sum(1 for s in self.solves if s.backtracking_used),
            "backtracking_nodes": sum(s.backtracking_nodes for s in self.solves),
            "ruleset_cells": sum(s.ruleset_cells for s in self.solves),
            "backtracking_cells": sum(s.backtracking_cells for s in self.solves),
            "total_duration": sum(s.duration for s in self.solves),
            "success_rate": solved / max(1, len(self.solves)),
        }
