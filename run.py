from transporte.main import create_app

app = create_app()

if __name__ == "__main__":
    # Bind a 0.0.0.0 para que la app sea accesible externamente en el entorno de Render
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])
