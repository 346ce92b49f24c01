from yatranslate.cli import main

main()
