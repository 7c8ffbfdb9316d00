from logreg_eval.cli import run

if __name__ == '__main__':
    run()
