#!/usr/bin/env python3
"""
Main Thread Task Analyzer - command line entry point
"""

import json
import sys

from mainthread_tasks import MainThreadTaskAnalyzer, TaskTreeError
from mainthread_tasks.web import prepare_results


def print_report(results):
    print("\nMain thread work breakdown:")
    print(f"  {'Category':<32} {'Time':>12}")
    print("  " + "-" * 45)
    for group in results['groups']:
        print(f"  {group['label']:<32} {group['time_formatted']:>12}")

    print("\nJavaScript boot-up time:")
    if not results['bootup']:
        print("  (no URL above threshold)")
    for row in results['bootup']:
        print(f"  {row['total_formatted']:>12}  {row['url']}")

    summary = results['summary']
    print(f"\n  Total boot-up time: {summary['bootup_time_formatted']}")
    print(f"  Total main thread time: {summary['total_time_formatted']}")


def main():
    import argparse
    parser = argparse.ArgumentParser(
        description='Rebuild main thread tasks from a Chrome trace and break down where the time went.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_trace.py trace.json
  python analyze_trace.py trace.json -o results.json
  python analyze_trace.py trace.json --cpu-multiplier 4 --threshold-ms 0
  python analyze_trace.py trace.json --anchor-event TracingStartedInBrowser
        """
    )
    parser.add_argument('input_file', help='Path to the trace JSON file')
    parser.add_argument('-o', '--output', dest='output_file', default=None,
                        help='Write the full results (including the task tree) to this JSON file')
    parser.add_argument('--cpu-multiplier', type=float, default=1.0,
                        help='CPU slowdown multiplier applied to task self-time')
    parser.add_argument('--threshold-ms', type=float, default=50.0,
                        help='Hide URLs whose boot-up time is below this many milliseconds')
    parser.add_argument('--anchor-event', action='append', dest='anchor_events',
                        help='Name of the tracing-started marker event (repeatable)')
    args = parser.parse_args()

    try:
        analyzer = MainThreadTaskAnalyzer(
            tracing_started_event_names=args.anchor_events or ('TracingStartedInPage',),
            cpu_slowdown_multiplier=args.cpu_multiplier,
            threshold_ms=args.threshold_ms
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        print(f"\nConfiguration:")
        print(f"  Input file: {args.input_file}")
        print(f"  CPU slowdown multiplier: {args.cpu_multiplier}")
        print(f"  Boot-up threshold: {args.threshold_ms} ms\n")
        analyzer.process_trace_file(args.input_file)
        results = prepare_results(analyzer)
        print_report(results)

        if args.output_file:
            with open(args.output_file, 'w') as f:
                json.dump(results, f, indent=2)
            print(f"\nResults written to {args.output_file}")
        print(f"\n✓ Analysis complete!")
    except FileNotFoundError:
        print(f"Error: File '{args.input_file}' not found.", file=sys.stderr)
        sys.exit(1)
    except TaskTreeError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
