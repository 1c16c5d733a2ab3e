from cardtable_gui.core.app import CardTableApp
from cardtable_gui.screens.table_screen import TableScreen

if __name__ == "__main__":
    # 1. On instancie l'App (elle charge la configuration et le ResourceManager)
    app = CardTableApp()

    # 2. On démarre directement sur la table
    app.set_screen(TableScreen(app))

    # 3. Lancement
    app.run()
