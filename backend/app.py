import os
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

# Import database query functions
from data_access.api_queries import get_high_scores, save_score

load_dotenv()

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

CORS(app, resources={r"/api/*": {"origins": allowed_origins}})


def _validate_score_payload(payload):
    """
    Check a saveScore body.

    Returns:
        (name, score, None) when valid, otherwise (None, None, error message)
    """
    if not isinstance(payload, dict):
        return None, None, "Request body must be a JSON object"

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        return None, None, "name must be a non-empty string"

    score = payload.get("score")
    # bool is an int subclass; reject it explicitly
    if isinstance(score, bool) or not isinstance(score, int) or score < 0:
        return None, None, "score must be a non-negative integer"

    return name.strip(), score, None


@app.route("/api/getHighScores", methods=["GET"])
def get_high_scores_endpoint():
    """
    Get the top 5 scores, highest first.

    Returns a JSON list of {"name": str, "score": int}.
    """
    try:
        return jsonify(get_high_scores())
    except Exception as e:
        logger.error(f"Error fetching high scores: {e}")
        return jsonify({"error": "Failed to load high scores"}), 500


@app.route("/api/saveScore", methods=["POST"])
def save_score_endpoint():
    """
    Persist one leaderboard entry.

    Body: {"name": str, "score": int}
    """
    payload = request.get_json(silent=True)
    name, score, error = _validate_score_payload(payload)
    if error:
        return jsonify({"error": error}), 400

    try:
        save_score(name, score)
    except Exception as e:
        logger.error(f"Error saving score for {name!r}: {e}")
        return jsonify({"error": "Failed to save score"}), 500

    return jsonify({"name": name, "score": score}), 201


@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    debug = os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
    app.run(host="0.0.0.0", port=port, debug=debug)
