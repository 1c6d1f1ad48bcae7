from neura_os.services.mock_fit import get_mock_biometrics
from neura_os.services.state_store import StateStore

__all__ = ['StateStore', 'get_mock_biometrics']
