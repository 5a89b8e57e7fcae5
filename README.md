# churnpipe

A small analysis pipeline over the Telco customer churn CSV. From one input
file it produces a set of plain-text and CSV reports:

- **Graph and MST** – records are dealt round-robin into 20 groups; each
  group's average monthly charge (rounded to two decimals) becomes a node,
  every pair of nodes is joined by an edge costing the floor of the two
  averages' sum, and a minimum spanning tree is built with Kruskal's algorithm,
  together with the spanning tree of the subgraph on nodes 0–4.
- **Sorting and searching** – records are merge-sorted by tenure, descending
  and stable, with timings for samples of up to 1000, 3500 and 7043 records;
  binary searches then find the last record whose tenure is at least 72, 60,
  45, 30 and 12.
- **0-1 knapsack** – the first 50 active customers (`Churn` equal to `No`) in
  tenure order are weighed by their rounded total charges and valued by ten
  times their monthly charge, rounded, and an optimal selection is found by
  dynamic programming for a capacity of 5000. The report also looks for three
  items and a capacity on which choosing by value/weight ratio loses to the
  optimum.

## Installation

```
pip install .
```

## Command line

```
churnpipe data/WA_Fn-UseC_-Telco-Customer-Churn.csv
```

It prints how many records were loaded and how many had an empty or
unreadable `TotalCharges`, then writes its reports into `results/` under the
current directory, creating it if needed:

| File | Contents |
|------|----------|
| `grafo_B_stats.txt` | node and edge counts, average edge cost, group averages |
| `mst_red.txt` | MST weight and edges, and the MST of nodes 0–4 |
| `timing_mergesort.txt` | merge-sort timings in milliseconds per sample size |
| `solicitudes_ordenadas.csv` | records sorted by tenure, descending |
| `busquedas_A.txt` | binary search results |
| `asignacion_bw.txt` | knapsack solution, greedy counterexample, complexity notes |
| `solicitudes_cargadas_stats.txt` | records loaded and `TotalCharges` nulls |

Without an argument it prints usage and exits with status 1; an input file
that cannot be opened, or that is empty, exits with status 2.

## Input

`churnpipe.parser.parse_csv` skips the header line and any row with fewer than
21 comma-separated fields. It reads column 0 as the customer ID, 5 as tenure,
18 as monthly charges, 19 as total charges and 20 as the churn flag. An
unparsable tenure or monthly charge becomes 0; a blank or unparsable total
charge becomes 0.0 and is counted in `total_nulls`. Fields are split on plain
commas; quoted fields are not handled.

## Library use

```python
from churnpipe.parser import parse_csv
from churnpipe.mergesort import merge_sort_desc
from churnpipe.binary_search import binary_search_first_ge
from churnpipe.graph import compute_group_monthly_avg, build_deterministic_graph
from churnpipe.kruskal import kruskal_mst
from churnpipe.knapsack import knapsack_dp

result = parse_csv("customers.csv")          # ParseResult
print(result.total_loaded, result.total_nulls)

graph = build_deterministic_graph(compute_group_monthly_avg(result.records, 20))
mst_edges, mst_cost = kruskal_mst(graph.n, graph.edges)

ordered = list(result.records)
merge_sort_desc(ordered)                     # sorts in place
index = binary_search_first_ge(ordered, 12)  # None if no tenure >= 12

best_value, taken = knapsack_dp([10, 20, 30], [60, 100, 120], 50)
```

`parse_csv` raises `OSError` if the file cannot be opened and `ValueError` if
it is empty. `knapsack_dp` raises `ValueError` for mismatched lengths, a
negative capacity or a negative weight.

`churnpipe.pipeline` also exposes the report writers on their own
(`write_sorted_csv`, `write_graph_stats`, `write_mst_report`,
`write_search_report`, `write_knapsack_report`) and
`find_greedy_counterexample`, which returns a `Counterexample` or `None`.
Everything can be run in one call with
`churnpipe.pipeline.run_pipeline(csv_path, results_dir)`, which returns the
`ParseResult`.

## Tests

```
pip install .[test]
pytest
```