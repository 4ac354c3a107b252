#!/usr/bin/env python3
"""
Coverage test runner for whack a mole
Runs tests with coverage and opens HTML report
"""

import subprocess
import sys
import webbrowser
from pathlib import Path


def run_coverage():
    """Run tests with coverage and generate HTML report"""
    print("Running tests with coverage...")
    print("=" * 50)
    
    # Run pytest with coverage over both packages
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--cov=game",
        "--cov=ui",
        "--cov-report=term-missing",
        "--cov-report=html:htmlcov",
        "-v"
    ]
    
    try:
        result = subprocess.run(cmd, check=False)
        
        if result.returncode == 0:
            print("\nAll tests passed!")
        else:
            print(f"\nSome tests failed (exit code: {result.returncode})")
        
        html_report = Path("htmlcov/index.html")
        if html_report.exists():
            print(f"\nCoverage report generated: {html_report.absolute()}")
            
            try:
                response = input("\nOpen HTML coverage report in browser? (y/n): ").strip().lower()
                if response in ['y', 'yes']:
                    webbrowser.open(f"file://{html_report.absolute()}")
                    print("Coverage report opened in browser")
            except (KeyboardInterrupt, EOFError):
                print("\nExiting...")
        
        return result.returncode == 0
        
    except FileNotFoundError:
        print("Error: Python or pytest not found")
        return False


if __name__ == "__main__":
    success = run_coverage()
    sys.exit(0 if success else 1)
