#!/usr/bin/env python3
"""
Flask Web Application for Task Tree Time Assigner
Provides a REST API endpoint that assigns estimated times to an uploaded task tree.
"""

from flask import Flask, request, jsonify
from werkzeug.utils import secure_filename
import ijson
import os
import tempfile
from time_assigner import TimeAssigner

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 50 * 1024 * 1024
app.config['UPLOAD_FOLDER'] = tempfile.gettempdir()
app.json.sort_keys = False

ALLOWED_EXTENSIONS = {'json'}

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def build_assigner():
    per_sheet = request.args.get('per_sheet', 'true').lower() == 'true'
    return TimeAssigner(per_sheet=per_sheet)


@app.route('/api/assign', methods=['POST'])
def assign_api():
    """
    API endpoint to assign estimated times to a task tree.
    Accepts either:
      - multipart/form-data with a 'file' field holding the JSON document
      - an application/json body holding the document itself
    Query parameters:
      - 'per_sheet': 'true'|'false' (optional, default: 'true')
    Returns: JSON with the assigned document and a summary
    """
    if request.is_json:
        document = request.get_json(silent=True)
        if document is None:
            return jsonify({'error': 'Malformed JSON body'}), 400
        
        assigner = build_assigner()
        try:
            assigner.assign_document(document)
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        
        return jsonify({'document': document, 'summary': assigner.summary})
    
    if 'file' not in request.files:
        return jsonify({'error': 'No file provided'}), 400
    
    file = request.files['file']
    
    if not file.filename:
        return jsonify({'error': 'No file selected'}), 400
    
    if not allowed_file(file.filename):
        return jsonify({'error': 'Invalid file type. Only JSON files are allowed.'}), 400
    
    filename = secure_filename(file.filename)
    filepath = os.path.join(app.config['UPLOAD_FOLDER'], filename)
    file.save(filepath)
    
    assigner = build_assigner()
    try:
        document = assigner.file_processor.process_file(filepath)
        assigner.assign_document(document)
    except (ValueError, ijson.JSONError) as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        return jsonify({'error': str(e)}), 500
    finally:
        os.remove(filepath)
    
    return jsonify({
        'filename': filename,
        'document': document,
        'summary': assigner.summary
    })


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5001)
