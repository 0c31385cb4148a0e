from parkright.main import run

run()
