from yumsize.cli import main

raise SystemExit(main())
