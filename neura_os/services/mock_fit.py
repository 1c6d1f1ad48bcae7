# services/mock_fit.py

from typing import Any, Dict

from neura_os.utils.datetime_utils import isoformat_utc

def get_mock_biometrics() -> Dict[str, Any]:
    """Fixed wearable payload; no real integration behind it"""
    return {
        "source": "mock",
        "timestamp": isoformat_utc(),
        "heartRate": 74,
        "steps": 8234,
        "sleepHours": 7.1,
        "stressLevel": 0.35,
    }
