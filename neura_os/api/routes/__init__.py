from neura_os.api.routes import energy, focus, psychologist, system, tasks

__all__ = ['energy', 'focus', 'psychologist', 'system', 'tasks']
