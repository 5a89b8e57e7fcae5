"""End-to-end processing of the churn CSV into the report files."""

from __future__ import annotations

import math
import sys
import time
from dataclasses import dataclass
from itertools import combinations, islice
from pathlib import Path
from typing import Sequence

from .binary_search import binary_search_first_ge
from .graph import Edge, Graph, build_deterministic_graph, compute_group_monthly_avg
from .knapsack import knapsack_dp
from .kruskal import kruskal_mst
from .mergesort import merge_sort_desc
from .parser import ParseResult, Solicitud, parse_csv

SORTED_CSV_HEADER = "customerID,tenure,MonthlyCharges,TotalCharges,Churn"
DEFAULT_QUERIES: tuple[tuple[str, int], ...] = (
    ("Q_A01", 72),
    ("Q_A02", 60),
    ("Q_A03", 45),
    ("Q_A04", 30),
    ("Q_A05", 12),
)
TIMING_SIZES = (1000, 3500, 7043)
GROUP_COUNT = 20
SUBGRAPH_NODES = 5
CANDIDATE_LIMIT = 50
DEFAULT_CAPACITY = 5000

_TABLE_RULE = "+------------------------+---------------------------+-------------+----------+"


@dataclass
class Counterexample:
    """Three items and a capacity for which picking by value/weight ratio is not optimal."""

    items: tuple[int, int, int]
    capacity: int
    greedy_value: int
    greedy_items: list[int]
    dp_value: int
    dp_items: list[int]


def _round_half_away(value: float) -> int:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _write_lines(path: str | Path, lines: Sequence[str]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def _edge_line(edge: Edge) -> str:
    return f"{edge.u},{edge.v},{edge.cost}"


def write_sorted_csv(path: str | Path, records: Sequence[Solicitud]) -> None:
    """Write the records as a five-column CSV with charges to two decimals."""
    _write_lines(
        path,
        [SORTED_CSV_HEADER]
        + [
            f"{r.customer_id},{r.tenure},{r.monthly_charges:.2f},{r.total_charges:.2f},{r.churn}"
            for r in records
        ],
    )


def write_graph_stats(path: str | Path, graph: Graph, group_avg: Sequence[float]) -> None:
    """Write node and edge counts, the mean edge cost and the group averages."""
    total_cost = sum(edge.cost for edge in graph.edges)
    avg_cost = total_cost / len(graph.edges) if graph.edges else 0.0
    _write_lines(
        path,
        [
            f"nodos={graph.n}",
            f"aristas={len(graph.edges)}",
            f"costo_promedio_arista={avg_cost:.2f}",
            "promedios_grupo=" + ";".join(f"{avg:.2f}" for avg in group_avg),
        ],
    )


def write_mst_report(path: str | Path, graph: Graph) -> tuple[list[Edge], int]:
    """Write the MST of ``graph`` and of its subgraph on the first five nodes.

    Returns the full MST's edges and total cost.
    """
    mst, total = kruskal_mst(graph.n, graph.edges)
    sub_edges = [e for e in graph.edges if e.u < SUBGRAPH_NODES and e.v < SUBGRAPH_NODES]
    sub_mst, sub_total = kruskal_mst(SUBGRAPH_NODES, sub_edges)

    lines = [f"peso_total={total}", "aristas(u,v,cost)"]
    lines.extend(_edge_line(e) for e in mst)
    lines.append(f"subgrafo_0_4_peso={sub_total}")
    lines.append("subgrafo_aristas(u,v,cost)")
    lines.extend(_edge_line(e) for e in sub_mst)
    _write_lines(path, lines)
    return mst, total


def write_search_report(
    path: str | Path,
    records: Sequence[Solicitud],
    queries: Sequence[tuple[str, int]] = DEFAULT_QUERIES,
) -> None:
    """For each (label, k) write the last record with tenure >= k, or NOT_FOUND.

    ``records`` must be sorted by descending tenure.
    """
    lines = []
    for label, k in queries:
        index = binary_search_first_ge(records, k)
        if index is None:
            lines.append(f"{label},{k},NOT_FOUND")
        else:
            found = records[index]
            lines.append(f"{label},{k},{found.customer_id},tenure={found.tenure}")
    _write_lines(path, lines)


def _write_timing(path: str | Path, records: Sequence[Solicitud]) -> None:
    lines = ["n,time_ms"]
    for size in TIMING_SIZES:
        use = min(len(records), size)
        if use == 0:
            continue
        sample = list(records[:use])
        start = time.perf_counter()
        merge_sort_desc(sample)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        lines.append(f"{use},{elapsed_ms:.2f}")
    _write_lines(path, lines)


def _best_subset(
    trio: tuple[int, int, int], weights: Sequence[int], values: Sequence[int], capacity: int
) -> tuple[int, list[int]]:
    best_value = 0
    best_items: list[int] = []
    for mask in range(1, 8):
        chosen = [idx for bit, idx in enumerate(trio) if mask >> bit & 1]
        weight = sum(weights[idx] for idx in chosen)
        value = sum(values[idx] for idx in chosen)
        if weight <= capacity and value > best_value:
            best_value, best_items = value, chosen
    return best_value, best_items


def _greedy_by_ratio(
    trio: tuple[int, int, int], weights: Sequence[int], values: Sequence[int], capacity: int
) -> tuple[int, list[int]]:
    by_ratio = sorted(((values[idx] / weights[idx], idx) for idx in trio), reverse=True)
    total_value = total_weight = 0
    chosen: list[int] = []
    for _, idx in by_ratio:
        if total_weight + weights[idx] <= capacity:
            total_value += values[idx]
            total_weight += weights[idx]
            chosen.append(idx)
    return total_value, chosen


def find_greedy_counterexample(
    weights: Sequence[int], values: Sequence[int]
) -> Counterexample | None:
    """Find the first triple of items, and a capacity, where greedy by ratio loses to the optimum."""
    for trio in combinations(range(len(weights)), 3):
        if any(weights[idx] <= 0 for idx in trio):
            continue
        i, j, k = trio
        for capacity in (weights[i] + weights[j], weights[i] + weights[k], weights[j] + weights[k]):
            if capacity <= 0:
                continue
            dp_value, dp_items = _best_subset(trio, weights, values, capacity)
            greedy_value, greedy_items = _greedy_by_ratio(trio, weights, values, capacity)
            if greedy_value < dp_value:
                return Counterexample(
                    items=trio,
                    capacity=capacity,
                    greedy_value=greedy_value,
                    greedy_items=greedy_items,
                    dp_value=dp_value,
                    dp_items=dp_items,
                )
    return None


def _counterexample_lines(
    found: Counterexample | None,
    candidates: Sequence[Solicitud],
    weights: Sequence[int],
    values: Sequence[int],
) -> list[str]:
    if found is None:
        return [
            "(No se encontro contraejemplo automatico en el conjunto de 50 solicitudes.)",
            "Nota: construir contraejemplo manual con 3 solicitudes ad-hoc.",
        ]
    lines = [f"Capacidad del contraejemplo: {found.capacity}", "", "Ítems del contraejemplo:"]
    for idx in found.items:
        ratio = values[idx] / weights[idx] if weights[idx] > 0 else 0.0
        lines.append(
            f"  {candidates[idx].customer_id}  w={weights[idx]}  v={values[idx]}  ratio={ratio:.4f}"
        )
    greedy_ids = "".join(f"{candidates[idx].customer_id} " for idx in found.greedy_items)
    dp_ids = "".join(f"{candidates[idx].customer_id} " for idx in found.dp_items)
    greedy_ids = greedy_ids or "(ninguna)"
    dp_ids = dp_ids or "(ninguna)"
    lines += [
        "",
        _TABLE_RULE,
        "| Enfoque                | Solicitudes seleccionadas | Valor total | Optimo?  |",
        _TABLE_RULE,
        f"| Codicioso (ratio v/w)  | {greedy_ids:<25} | {found.greedy_value:<11} | No       |",
        f"| PD (Mochila 0-1)       | {dp_ids:<25} | {found.dp_value:<11} | Si       |",
        _TABLE_RULE,
    ]
    return lines


def write_knapsack_report(
    path: str | Path, records: Sequence[Solicitud], capacity: int = DEFAULT_CAPACITY
) -> tuple[int, list[int]]:
    """Solve the bandwidth knapsack for the first 50 active records and write the report.

    ``records`` should be sorted by descending tenure. Weights are rounded total charges,
    values are rounded tenfold monthly charges. Returns the optimum and the chosen indices
    into the candidate list.
    """
    candidates = list(islice((r for r in records if r.churn == "No"), CANDIDATE_LIMIT))
    weights = [_round_half_away(r.total_charges) for r in candidates]
    values = [_round_half_away(r.monthly_charges * 10.0) for r in candidates]

    best_value, taken = knapsack_dp(weights, values, capacity)
    used = sum(weights[idx] for idx in taken)

    lines = [
        "=== MÓDULO C: Asignación de ancho de banda (Mochila 0-1) ===",
        "",
        f"Capacidad W={capacity} unidades",
        f"Solicitudes candidatas (top-50 activas por tenure): {len(candidates)}",
        "",
        "--- Solución Óptima (Programación Dinámica) ---",
        f"Valor óptimo total: {best_value} centavos",
        f"Solicitudes seleccionadas: {len(taken)}",
        f"Ancho de banda usado: {used} / {capacity}",
        "customerIDs incluidos:",
    ]
    lines.extend(
        f"  {candidates[idx].customer_id} (w={weights[idx]}, v={values[idx]})" for idx in taken
    )
    lines += ["", "--- Contraejemplo: fallo del enfoque codicioso ---"]
    lines += _counterexample_lines(
        find_greedy_counterexample(weights, values), candidates, weights, values
    )
    lines += [
        "",
        "--- Analisis de complejidad ---",
        f"Tiempo: Theta(n * W) = Theta({CANDIDATE_LIMIT} * {capacity}) = "
        f"Theta({CANDIDATE_LIMIT * capacity:,}) operaciones.",
        f"Espacio: Theta(n * W) para la tabla dp[0..n][0..W] = "
        f"{CANDIDATE_LIMIT + 1} x {capacity + 1} enteros.",
        "Pseudopolinomialidad: W aparece como valor numerico, no como longitud",
        "de su representacion binaria (log W bits). Si W creciera exponencialmente,",
        "el algoritmo dejaria de ser polinomial en la longitud de la entrada.",
        "Por esto se clasifica como pseudopolinomial, no polinomial estricto.",
    ]
    _write_lines(path, lines)
    return best_value, taken


def _run(parsed: ParseResult, results_dir: str | Path) -> None:
    out = Path(results_dir)
    out.mkdir(parents=True, exist_ok=True)
    records = parsed.records

    group_avg = compute_group_monthly_avg(records, GROUP_COUNT)
    graph = build_deterministic_graph(group_avg)
    write_graph_stats(out / "grafo_B_stats.txt", graph, group_avg)
    write_mst_report(out / "mst_red.txt", graph)

    _write_timing(out / "timing_mergesort.txt", records)
    ordered = list(records)
    merge_sort_desc(ordered)
    write_sorted_csv(out / "solicitudes_ordenadas.csv", ordered)
    write_search_report(out / "busquedas_A.txt", ordered)

    write_knapsack_report(out / "asignacion_bw.txt", ordered, DEFAULT_CAPACITY)

    _write_lines(
        out / "solicitudes_cargadas_stats.txt",
        [f"total_loaded={parsed.total_loaded}", f"total_nulls={parsed.total_nulls}"],
    )


def run_pipeline(csv_path: str | Path, results_dir: str | Path = "results") -> ParseResult:
    """Load ``csv_path`` and write every report into ``results_dir``; return what was loaded."""
    parsed = parse_csv(csv_path)
    _run(parsed, results_dir)
    return parsed


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Uso: churnpipe data/WA_Fn-UseC_-Telco-Customer-Churn.csv")
        return 1
    path = args[0]
    try:
        parsed = parse_csv(path)
    except (OSError, ValueError):
        print(f"Error: no se pudo abrir '{path}'", file=sys.stderr)
        return 2
    print(f"Registros cargados: {parsed.total_loaded}")
    print(f"Registros con TotalCharges nulo: {parsed.total_nulls}")
    _run(parsed, "results")
    print("Pipeline completo. Archivos escritos en results/.")
    return 0