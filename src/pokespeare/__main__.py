from pokespeare.api.app import run

run()
