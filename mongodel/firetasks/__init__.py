from mongodel.firetasks.delete import DeleteDocument
