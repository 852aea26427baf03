"""
Conversion Summary

Prints a short, step-by-step view of what the conversion did to the catalogue:
rows in, rows out and the notable changes of each step.
"""

from typing import Dict, Any, List
from datetime import datetime


class TransformationSummary:
    """Console summary of the catalogue conversion"""

    def __init__(self, quiet_mode: bool = False):
        self.quiet_mode = quiet_mode
        self.steps: List[Dict[str, Any]] = []
        self.start_time = datetime.now()

    def print_header(self, input_file: str, output_file: str):
        """Print run banner"""
        if not self.quiet_mode:
            print("\n" + "=" * 80)
            print("📦 BOX CATALOGUE → SNIPE-IT CSV CONVERSION")
            print("=" * 80)
            print(f"📥 Input:  {input_file}")
            print(f"📤 Output: {output_file}")
            print(f"⏰ Started: {self.start_time.strftime('%Y-%m-%d %H:%M:%S')}")
            print("=" * 80)

    def add_step(self, step_name: str, before_count: int, after_count: int,
                 changes: List[str] = None, duration: float = 0):
        """Record a step and print it"""
        step_data = {
            'name': step_name,
            'before': before_count,
            'after': after_count,
            'changes': changes or [],
            'duration': duration
        }
        self.steps.append(step_data)

        if not self.quiet_mode:
            self._print_step(step_data)

    def _print_step(self, step: Dict[str, Any]):
        before = step['before']
        after = step['after']

        if before == after:
            change_str = "no change"
        elif after > before:
            change_str = f"+{after - before}"
        else:
            change_str = f"-{before - after}"

        print(f"📋 {step['name']:<30} {before:>6} → {after:<6} ({change_str})")

        changes = step['changes']
        for change in changes[:5]:
            print(f"   • {change}")
        if len(changes) > 5:
            print(f"   • ... and {len(changes) - 5} more changes")

    def print_footer(self, success: bool, output_file: str = ""):
        """Print closing line with total duration"""
        if self.quiet_mode:
            return

        duration = (datetime.now() - self.start_time).total_seconds()
        print("-" * 80)
        if success:
            print(f"✅ Conversion completed in {duration:.2f}s: {output_file}")
        else:
            print(f"❌ Conversion failed after {duration:.2f}s, check the log for details")
        print("=" * 80)


def describe_parse_stats(stats: Dict[str, int]) -> List[str]:
    """Human readable lines for the non-zero parse counters"""
    labels = [
        ('preamble_rows', "preamble rows skipped"),
        ('blank_rows', "blank box rows dropped"),
        ('verification_rows', "verification rows dropped"),
        ('retired_rows', "empty/destroyed/unused box rows dropped"),
        ('no_content_rows', "rows without contents dropped"),
        ('anomalies', "rows flagged for review"),
    ]
    return [f"{stats[key]} {label}" for key, label in labels if stats.get(key)]
