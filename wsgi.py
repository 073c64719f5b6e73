"""
Cabana - Aplicação Flask principal
Ponto de entrada para o gunicorn (wsgi:app)
"""
from cabana import create_app

# Criar instância da app para gunicorn
app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config.get("DEBUG", False), host="0.0.0.0", port=app.config["PORT"])
