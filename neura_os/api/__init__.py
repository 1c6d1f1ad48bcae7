from neura_os.api.app import create_app

__all__ = ['create_app']
