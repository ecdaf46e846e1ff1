# adoptme/docs/routes.py
from flask import Blueprint, jsonify, current_app, url_for

docs_bp = Blueprint('docs_bp', __name__)

SWAGGER_UI_VERSION = "5.17.14"

SWAGGER_UI_HTML = """<!DOCTYPE html>
<html lang="es">
<head>
  <meta charset="utf-8" />
  <title>{title}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui.css" />
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui-bundle.js"></script>
  <script>
    window.onload = function () {{
      window.ui = SwaggerUIBundle({{ url: "{spec_url}", dom_id: "#swagger-ui" }});
    }};
  </script>
</body>
</html>
"""

@docs_bp.route('', methods=['GET'])
def swagger_ui():
    """대화형 API 문서(Swagger UI)."""
    html = SWAGGER_UI_HTML.format(
        title=current_app.config['API_TITLE'],
        version=SWAGGER_UI_VERSION,
        spec_url=url_for('docs_bp.openapi_json'),
    )
    return html, 200, {'Content-Type': 'text/html; charset=utf-8'}

@docs_bp.route('/openapi.json', methods=['GET'])
def openapi_json():
    return jsonify(current_app.openapi_spec), 200
