"""Run the Streamlit UI from project root. Use: python run_app.py [--port 8501]"""
import argparse
import os
import subprocess
import sys

parser = argparse.ArgumentParser(description="Serve the AI Readiness Score UI with Streamlit")
parser.add_argument("--port", type=int, default=8501)
parser.add_argument("--headless", action="store_true", help="Do not open a browser tab")
args = parser.parse_args()

root = os.path.dirname(os.path.abspath(__file__))
app_dir = os.path.join(root, "ai_readiness")
os.chdir(app_dir)
command = [sys.executable, "-m", "streamlit", "run", "app.py", "--server.port", str(args.port)]
if args.headless:
    command += ["--server.headless", "true"]
subprocess.run(command, check=True)
