from playground_proxy.main import run

run()
