from flashcards.cli import main

raise SystemExit(main())
