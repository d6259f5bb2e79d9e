# extensiones.py
from flask_socketio import SocketIO

# Se inicializa con la app en crear_app(); los módulos importan esta instancia
socketio = SocketIO()
