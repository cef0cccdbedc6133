# Static language, script and starter dictionary tables
