"""Run the HTTP API from project root. Use: python run_api.py [--port 8000]"""
import argparse
import os
import subprocess
import sys

parser = argparse.ArgumentParser(description="Serve the AI Readiness Score API with uvicorn")
parser.add_argument("--host", default="127.0.0.1")
parser.add_argument("--port", type=int, default=8000)
args = parser.parse_args()

root = os.path.dirname(os.path.abspath(__file__))
app_dir = os.path.join(root, "ai_readiness")
os.chdir(app_dir)
subprocess.run(
    [sys.executable, "-m", "uvicorn", "api:app", "--host", args.host, "--port", str(args.port)],
    check=True,
)
