#!/usr/bin/env python
"""
Run script for ServiGO.
Use: python run.py
Or: streamlit run servigo/ui/app.py
"""
import sys
import subprocess


def main():
    """Run the Streamlit app."""
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        "servigo/ui/app.py",
        "--server.port=8501",
        "--browser.gatherUsageStats=false",
    ])


if __name__ == "__main__":
    main()
