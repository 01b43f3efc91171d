from .scara_control import ScaraControlWidget
