#!/usr/bin/env python3
"""
Flask Web Application for Main Thread Task Analyzer
Provides REST API endpoints for rebuilding and summarizing main thread tasks.
"""

from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename
import os
import tempfile
from mainthread_tasks import MainThreadTaskAnalyzer, TaskTreeError, DEFAULT_TAXONOMY
from mainthread_tasks.web import prepare_results

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 500 * 1024 * 1024
app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()

ALLOWED_EXTENSIONS = {'json', 'gz'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def _float_field(name, default):
    value = request.form.get(name)
    if value is None or value == '':
        return default
    return float(value)


@app.route('/api/task-groups', methods=['GET'])
def task_groups_api():
    """List the task categories used for classification."""
    return jsonify([
        {'id': group.id, 'label': group.label, 'trace_event_names': sorted(group.trace_event_names)}
        for group in DEFAULT_TAXONOMY.groups
    ])


@app.route('/api/analyze', methods=['POST'])
def analyze_api():
    """
    API endpoint to analyze a trace file.
    Accepts: multipart/form-data with fields:
      - 'file': trace JSON file (optionally gzipped)
      - 'cpu_multiplier': float (optional, default: 1.0)
      - 'threshold_ms': float (optional, default: 50)
    Returns: JSON with analysis results
    """
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400

    file = request.files['file']

    if not file.filename:
        return jsonify({'error': 'No file selected'}), 400

    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Only JSON files are allowed.'}), 400

    try:
        analyzer = MainThreadTaskAnalyzer(
            cpu_slowdown_multiplier=_float_field('cpu_multiplier', 1.0),
            threshold_ms=_float_field('threshold_ms', 50.0)
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    filename = secure_filename(file.filename)
    fd, filepath = tempfile.mkstemp(suffix='-' + filename, dir=app.config['UPLOAD_FOLDER'])
    os.close(fd)
    try:
        file.save(filepath)
        analyzer.process_trace_file(filepath)
        return jsonify(prepare_results(analyzer))

    except TaskTreeError as e:
        return jsonify({'error': str(e), 'type': type(e).__name__}), 422

    except Exception as e:
        return jsonify({'error': str(e)}), 500

    finally:
        os.remove(filepath)


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
