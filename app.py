import os
from flask import Flask, jsonify, Blueprint, request, current_app, send_from_directory
from flask_cors import CORS

from config import Settings, load_settings, configure_logging, MAX_CONTENT_LENGTH
from spreadsheet import parse_spreadsheet
from search import search_sites
from storage import SiteStore

api = Blueprint("api", __name__)


def _store() -> SiteStore:
    return current_app.extensions["site_store"]


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _body():
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


@api.get("/health")
def health():
    return jsonify({"message": "Site lookup API is running", "ok": True})


@api.get("/data")
def get_data():
    store = _store()
    return jsonify({"sites": store.sites, "matrices": store.matrices})


@api.get("/stats")
def stats():
    store = _store()
    return jsonify({
        "siteCount": store.site_count,
        "matrixCount": store.matrix_count,
        "fortivoiceUrlTemplate": _settings().fortivoice_url_template,
    })


@api.get("/matrices")
def matrices():
    return jsonify({"matrices": _store().matrices})


@api.post("/admin/verify")
def admin_verify():
    # no login for normal users; only the admin menu asks for this
    password = _body().get("password")
    supplied = str(password) if password else ""
    return jsonify({"ok": supplied == _settings().admin_password})


@api.get("/search")
def search():
    try:
        results = search_sites(_store().sites, request.args.get("q", ""), request.args.get("mode"))
        return jsonify(results)
    except Exception:
        current_app.logger.exception("Search error")
        return jsonify([]), 500


@api.post("/data")
def upload_sites():
    body = _body()
    raw_text = body.get("rawText")
    if not raw_text:
        return jsonify({"error": "No data received"}), 400
    try:
        current_app.logger.info("Sites upload: %d characters", len(raw_text))
        count = _store().replace_sites(parse_spreadsheet(raw_text))
        current_app.logger.info("Saved %d sites", count)
        return jsonify({"success": True, "count": count})
    except Exception as e:
        current_app.logger.exception("Sites upload error")
        return jsonify({"error": str(e)}), 500


@api.post("/matrix")
def upload_matrix():
    body = _body()
    brand = body.get("brand"); raw_text = body.get("rawText")
    if not brand or not raw_text:
        return jsonify({"error": "Brand name and matrix data required"}), 400
    try:
        current_app.logger.info("Matrix upload for brand: %s (%d chars)", brand, len(raw_text))
        rows = _store().set_matrix(brand, parse_spreadsheet(raw_text))
        current_app.logger.info("Saved matrix for %s (%d rows)", brand, rows)
        return jsonify({"success": True, "brand": brand, "rows": rows})
    except Exception as e:
        current_app.logger.exception("Matrix upload error")
        return jsonify({"error": str(e)}), 500


def create_app(store: SiteStore = None, settings: Settings = None) -> Flask:
    settings = settings or load_settings()
    if store is None:
        store = SiteStore(settings.sites_path, settings.matrices_path).load()

    app = Flask(__name__, static_folder=settings.public_dir, static_url_path="")
    CORS(app)
    app.url_map.strict_slashes = False
    app.config["MAX_CONTENT_LENGTH"] = MAX_CONTENT_LENGTH
    # records keep their spreadsheet column order
    app.json.sort_keys = False
    app.config["SETTINGS"] = settings
    app.extensions["site_store"] = store

    app.register_blueprint(api, url_prefix="/api")

    @app.get("/")
    def root():
        return send_from_directory(settings.public_dir, "index.html")

    @app.get("/favicon.ico")
    def favicon():
        if os.path.exists(os.path.join(settings.public_dir, "favicon.ico")):
            return send_from_directory(settings.public_dir, "favicon.ico")
        return ("", 204)

    return app


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)
    print("Routes:")
    for r in app.url_map.iter_rules():
        print(f"  {r.rule}")
    print(f"ICS Site# Lookup + Port Matrices running on http://{settings.host}:{settings.port}")
    # one request at a time; uploads rewrite whole files
    app.run(host=settings.host, port=settings.port, threaded=False)
