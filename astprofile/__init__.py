"""
astprofile: Complexity profile and syntax-tree graph for a single source file.

astprofile walks the syntax tree of one C/C++ or Python file and, in the same
depth-first pass:
- Counts decision points (a rough cyclomatic complexity)
- Tracks the deepest loop nesting (an advisory time-complexity label)
- Counts variable declarations (an advisory space-complexity label)
- Emits a Graphviz DOT graph of the tree for rendering

Usage:
    from pathlib import Path
    from astprofile.core.analyzer import analyze_file
    from astprofile.core.report import ComplexityReport

    result = analyze_file(Path("main.c"))
    report = ComplexityReport.from_metrics(result.metrics)
    print(report.time_complexity)
"""

__version__ = "0.1.0"
